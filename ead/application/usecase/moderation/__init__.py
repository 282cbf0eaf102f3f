"""Moderation use cases."""

from .list_queue import (
    ListModerationQueueRequest,
    ListModerationQueueResponse,
    ListModerationQueueUseCase,
)
from .load_full_thread import (
    LoadFullThreadRequest,
    LoadFullThreadResponse,
    LoadFullThreadUseCase,
)
from .load_target_comments import (
    LoadTargetCommentsRequest,
    LoadTargetCommentsResponse,
    LoadTargetCommentsUseCase,
)
from .moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from .reply_as_moderator import (
    ReplyAsModeratorRequest,
    ReplyAsModeratorResponse,
    ReplyAsModeratorUseCase,
)

__all__ = [
    "ListModerationQueueRequest",
    "ListModerationQueueResponse",
    "ListModerationQueueUseCase",
    "LoadFullThreadRequest",
    "LoadFullThreadResponse",
    "LoadFullThreadUseCase",
    "LoadTargetCommentsRequest",
    "LoadTargetCommentsResponse",
    "LoadTargetCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
    "ReplyAsModeratorRequest",
    "ReplyAsModeratorResponse",
    "ReplyAsModeratorUseCase",
]
