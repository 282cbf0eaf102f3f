"""Moderation note domain service."""

from datetime import datetime

import logfire

from ead.domain.model import ModerationNote
from ead.domain.repository import NoteRepository
from ead.domain.value import CommentId

from .base import Service


class NoteService(Service):
    """Domain service for private moderator notes."""

    def __init__(self, note_repository: NoteRepository) -> None:
        """Initialize note service.

        Args:
            note_repository: Note repository
        """
        self.note_repository = note_repository

    async def get_note(self, comment_id: CommentId) -> ModerationNote | None:
        """Get the note of a comment, if any."""
        with self.span("get_note", comment_id=str(comment_id)):
            return await self.note_repository.get(comment_id)

    async def save_note(
        self, comment_id: CommentId, text: str
    ) -> ModerationNote | None:
        """Save the note of a comment.

        Blank text clears the note.

        Args:
            comment_id: Comment ID
            text: Note text

        Returns:
            The saved note, or None when the note was cleared
        """
        with self.span("save_note", comment_id=str(comment_id)):
            trimmed = text.strip()
            if not trimmed:
                await self.note_repository.delete(comment_id)
                logfire.info("Note cleared", comment_id=str(comment_id))
                return None

            note = ModerationNote(
                comment_id=comment_id, text=trimmed, updated_at=datetime.now()
            )
            saved = await self.note_repository.save(note)
            logfire.info(
                "Note saved", comment_id=str(comment_id), length=len(trimmed)
            )
            return saved
