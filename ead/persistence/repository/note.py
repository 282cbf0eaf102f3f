"""SQL implementation of the moderation note repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ead.domain.model import ModerationNote
from ead.domain.repository import NoteRepository
from ead.domain.value import CommentId
from ead.persistence.mappers import note_to_dict, row_to_note
from ead.persistence.tables import comment_notes_table


class SqlNoteRepository(NoteRepository):
    """SQLAlchemy implementation of NoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self, comment_id: CommentId) -> Optional[ModerationNote]:
        """Find the note attached to a comment."""
        stmt = select(comment_notes_table).where(
            comment_notes_table.c.comment_id == str(comment_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_note(row._asdict()) if row else None

    async def save(self, note: ModerationNote) -> ModerationNote:
        """Create or replace the note of a comment."""
        values = note_to_dict(note)
        existing = await self.get(note.comment_id)

        if existing:
            stmt = (
                comment_notes_table.update()
                .where(comment_notes_table.c.comment_id == values["comment_id"])
                .values(text=values["text"], updated_at=values["updated_at"])
            )
        else:
            stmt = comment_notes_table.insert().values(**values)
        await self.session.execute(stmt)
        await self.session.flush()

        return await self.get(note.comment_id) or note

    async def delete(self, comment_id: CommentId) -> None:
        """Remove the note of a comment, if any."""
        stmt = comment_notes_table.delete().where(
            comment_notes_table.c.comment_id == str(comment_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()
