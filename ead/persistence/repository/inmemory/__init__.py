"""In-memory implementations for testing."""

from .comment import InMemoryCommentGateway
from .note import InMemoryNoteRepository

__all__ = [
    "InMemoryCommentGateway",
    "InMemoryNoteRepository",
]
