"""Comment entity.

Comments are threaded discussions attached to a target (course or activity).
Threading is expressed only through ``parent_id``; the depth of a comment is
derived from its position in a built thread and is never stored on it.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from ead.domain.model.common import DomainModel
from ead.domain.value import CommentId, CommentStatus, TargetId, TargetType


class Comment(DomainModel):
    """Canonical comment shape produced by the gateway normalizer.

    Core components never look at raw backend field names; they only see
    this model.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - replies: Pre-nested children, when the backend chose to nest them
    - replies_count: Backend aggregate, independent of what is loaded
    """

    id: CommentId
    parent_id: Optional[CommentId] = None
    target_type: Optional[TargetType] = None
    target_id: Optional[TargetId] = None
    body: str = ""
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    status: CommentStatus = CommentStatus.PENDING
    user_id: Optional[str] = None
    author_name: Optional[str] = None
    created_at: Optional[datetime] = None
    replies_count: Optional[int] = Field(default=None, ge=0)
    replies: tuple["Comment", ...] = ()
    meta: Optional[dict[str, Any]] = None

    @property
    def is_root(self) -> bool:
        """Whether this comment is attached directly to its target."""
        return self.parent_id is None
