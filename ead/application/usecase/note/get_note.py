"""Get moderation note use case."""

from datetime import datetime

from pydantic import BaseModel

from ead.domain.model import ModerationNote
from ead.domain.service import NoteService
from ead.domain.value import CommentId


class GetNoteRequest(BaseModel):
    """Get note request."""

    comment_id: str


class NoteResponse(BaseModel):
    """Note of a comment; ``text`` is None when there is none."""

    comment_id: str
    text: str | None
    updated_at: datetime | None

    @classmethod
    def from_note(cls, comment_id: str, note: ModerationNote | None) -> "NoteResponse":
        return cls(
            comment_id=comment_id,
            text=note.text if note else None,
            updated_at=note.updated_at if note else None,
        )


class GetNoteUseCase:
    """Use case for reading the private note a moderator left on a comment."""

    def __init__(self, note_service: NoteService) -> None:
        """Initialize get note use case.

        Args:
            note_service: Note domain service
        """
        self.note_service = note_service

    async def execute(self, request: GetNoteRequest) -> NoteResponse:
        note = await self.note_service.get_note(CommentId(request.comment_id))
        return NoteResponse.from_note(request.comment_id, note)
