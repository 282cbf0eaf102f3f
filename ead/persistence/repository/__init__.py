"""SQL repository implementations."""

from ead.persistence.repository.note import SqlNoteRepository

__all__ = [
    "SqlNoteRepository",
]
