"""Domain value objects for EAD comments.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    ``pending`` is the only non-terminal status from the client's point of
    view: it moves to ``approved`` or ``rejected`` and never back.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, raw: object) -> "CommentStatus":
        """Parse a backend status value, defaulting to pending."""
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return cls.PENDING


class StatusFilter(str, Enum):
    """Status filter accepted by list endpoints."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    ALL = "all"


class TargetType(str, Enum):
    """Type of entity a root comment is attached to."""

    COURSE = "course"
    ACTIVITY = "activity"

    @classmethod
    def from_backend(cls, raw: object) -> "TargetType | None":
        """Parse a target type from either a short name or a model class name.

        Accepts ``activity``, ``Activity`` and ``App\\Models\\Activity``.
        The course model is named ``Curso`` on the backend.
        """
        if isinstance(raw, cls):
            return raw
        text = str(raw or "").strip()
        if not text:
            return None
        short = text.split("\\")[-1].lower()
        aliases = {
            "course": cls.COURSE,
            "curso": cls.COURSE,
            "activity": cls.ACTIVITY,
            "atividade": cls.ACTIVITY,
        }
        return aliases.get(short)


class ModerationAction(str, Enum):
    """Moderation action applied to a comment."""

    APPROVE = "approve"
    REJECT = "reject"
    DELETE = "delete"
