"""Private moderation note routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from ead.application.usecase.note import (
    GetNoteRequest,
    GetNoteUseCase,
    NoteResponse,
    SaveNoteRequest,
    SaveNoteUseCase,
)

router = APIRouter(prefix="/moderation", tags=["notes"], route_class=DishkaRoute)


class SaveNoteAPIRequest(BaseModel):
    """API request for writing a note. Blank text clears it."""

    text: str = Field(max_length=2000)


@router.get("/comments/{comment_id}/note", response_model=NoteResponse)
async def get_note(
    comment_id: str,
    use_case: FromDishka[GetNoteUseCase],
) -> NoteResponse:
    """Get the private note left on a comment."""
    return await use_case.execute(GetNoteRequest(comment_id=comment_id))


@router.put("/comments/{comment_id}/note", response_model=NoteResponse)
async def save_note(
    comment_id: str,
    request: SaveNoteAPIRequest,
    use_case: FromDishka[SaveNoteUseCase],
) -> NoteResponse:
    """Write or clear the private note on a comment.

    Notes are never sent to the EAD backend.
    """
    return await use_case.execute(
        SaveNoteRequest(comment_id=comment_id, text=request.text)
    )
