"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from ead.domain.model import ModerationNote
from ead.domain.value import CommentId


def row_to_note(row: Dict[str, Any]) -> ModerationNote:
    """Convert database row to ModerationNote domain model.

    Args:
        row: Database row as dict

    Returns:
        ModerationNote domain model
    """
    return ModerationNote(
        comment_id=CommentId(str(row["comment_id"])),
        text=row["text"],
        updated_at=row["updated_at"],
    )


def note_to_dict(note: ModerationNote) -> Dict[str, Any]:
    """Convert ModerationNote domain model to database dict.

    Args:
        note: ModerationNote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "comment_id": str(note.comment_id),
        "text": note.text,
        "updated_at": note.updated_at,
    }
