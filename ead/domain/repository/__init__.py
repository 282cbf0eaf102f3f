"""Repository interfaces for the EAD comment domain.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter and persistence layers.
"""

from ead.domain.repository.comment import CommentGateway
from ead.domain.repository.note import NoteRepository

__all__ = [
    "CommentGateway",
    "NoteRepository",
]
