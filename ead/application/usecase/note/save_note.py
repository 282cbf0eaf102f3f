"""Save moderation note use case."""

from pydantic import BaseModel, Field

from ead.application.usecase.note.get_note import NoteResponse
from ead.domain.service import NoteService
from ead.domain.value import CommentId


class SaveNoteRequest(BaseModel):
    """Save note request. Blank text clears the note."""

    comment_id: str
    text: str = Field(max_length=2000)


class SaveNoteUseCase:
    """Use case for writing or clearing the private note on a comment."""

    def __init__(self, note_service: NoteService) -> None:
        """Initialize save note use case.

        Args:
            note_service: Note domain service
        """
        self.note_service = note_service

    async def execute(self, request: SaveNoteRequest) -> NoteResponse:
        note = await self.note_service.save_note(
            CommentId(request.comment_id), request.text
        )
        return NoteResponse.from_note(request.comment_id, note)
