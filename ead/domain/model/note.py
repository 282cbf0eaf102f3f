"""Moderation note entity."""

from datetime import datetime

from pydantic import Field

from ead.domain.model.common import DomainModel
from ead.domain.value import CommentId


class ModerationNote(DomainModel):
    """Internal moderator annotation on a comment.

    Only visible in the moderation panel and stored locally, never sent to
    the school backend.
    """

    comment_id: CommentId
    text: str = Field(min_length=1, max_length=2000)
    updated_at: datetime = Field(default_factory=datetime.now)
