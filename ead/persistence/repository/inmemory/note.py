"""In-memory note repository for testing."""

from typing import Optional

from ead.domain.model import ModerationNote
from ead.domain.repository import NoteRepository
from ead.domain.value import CommentId


class InMemoryNoteRepository(NoteRepository):
    """In-memory implementation of NoteRepository for testing."""

    def __init__(self) -> None:
        self._notes: dict[CommentId, ModerationNote] = {}

    async def get(self, comment_id: CommentId) -> Optional[ModerationNote]:
        """Find the note attached to a comment."""
        return self._notes.get(comment_id)

    async def save(self, note: ModerationNote) -> ModerationNote:
        """Create or replace the note of a comment."""
        self._notes[note.comment_id] = note
        return note

    async def delete(self, comment_id: CommentId) -> None:
        """Remove the note of a comment, if any."""
        self._notes.pop(comment_id, None)
