"""Domain model entities for EAD comments."""

from ead.domain.model.comment import Comment
from ead.domain.model.note import ModerationNote
from ead.domain.model.page import Page
from ead.domain.model.thread import (
    DEFAULT_MAX_DEPTH,
    CommentForest,
    ReplyMap,
    ThreadNode,
)

__all__ = [
    "Comment",
    "CommentForest",
    "DEFAULT_MAX_DEPTH",
    "ModerationNote",
    "Page",
    "ReplyMap",
    "ThreadNode",
]
