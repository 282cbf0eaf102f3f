"""Domain services."""

from .abort import AbortSignal
from .base import Service
from .comment_service import CommentService
from .moderation_service import (
    MODERATION_VIEW,
    ModerationQueue,
    ModerationService,
    target_view,
)
from .note_service import NoteService
from .paged_fetcher import PagedFetcher
from .reply_policy import (
    DEFAULT_DENYLIST,
    Ok,
    Rejected,
    RejectionReason,
    ReplyPolicy,
    ValidationResult,
)
from .status_translator import StatusTranslator
from .thread_builder import ThreadBuilder
from .thread_cache import DEFAULT_SESSION, ThreadCache, ThreadCacheRegistry, UiState
from .thread_merger import ThreadMerger

__all__ = [
    "DEFAULT_SESSION",
    "AbortSignal",
    "CommentService",
    "DEFAULT_DENYLIST",
    "MODERATION_VIEW",
    "ModerationQueue",
    "ModerationService",
    "NoteService",
    "Ok",
    "PagedFetcher",
    "Rejected",
    "RejectionReason",
    "ReplyPolicy",
    "Service",
    "StatusTranslator",
    "ThreadBuilder",
    "ThreadCache",
    "ThreadCacheRegistry",
    "ThreadMerger",
    "UiState",
    "ValidationResult",
    "target_view",
]
