"""Moderation note repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ead.domain.model import ModerationNote
from ead.domain.value import CommentId


class NoteRepository(ABC):
    """Repository for private moderator notes, one per comment."""

    @abstractmethod
    async def get(self, comment_id: CommentId) -> Optional[ModerationNote]:
        """Find the note attached to a comment.

        Args:
            comment_id: The comment ID

        Returns:
            The note if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, note: ModerationNote) -> ModerationNote:
        """Create or replace the note of a comment."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Remove the note of a comment, if any."""
        pass
