"""Domain value objects for EAD comments."""

from ead.domain.value.identifiers import CommentId, TargetId
from ead.domain.value.types import (
    CommentStatus,
    ModerationAction,
    StatusFilter,
    TargetType,
)

__all__ = [
    # Identifiers
    "CommentId",
    "TargetId",
    # Types
    "CommentStatus",
    "ModerationAction",
    "StatusFilter",
    "TargetType",
]
