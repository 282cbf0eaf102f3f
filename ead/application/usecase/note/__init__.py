"""Moderation note use cases."""

from .get_note import GetNoteRequest, GetNoteUseCase, NoteResponse
from .save_note import SaveNoteRequest, SaveNoteUseCase

__all__ = [
    "GetNoteRequest",
    "GetNoteUseCase",
    "NoteResponse",
    "SaveNoteRequest",
    "SaveNoteUseCase",
]
