"""Integration tests for SqlNoteRepository.

These tests run against a throwaway SQLite database through the production
persistence provider.
"""

from datetime import datetime

import pytest
import pytest_asyncio

from ead.domain.model import ModerationNote
from ead.domain.repository import NoteRepository
from ead.domain.service import NoteService
from ead.domain.value import CommentId
from tests.di import build_test_container


@pytest_asyncio.fixture
async def integration_container(tmp_path, monkeypatch):
    """Container with the real notes store on a temporary SQLite file."""
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path}/notes.db")
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


class TestSqlNoteRepositoryIntegration:
    """Integration tests for SqlNoteRepository."""

    @pytest.mark.asyncio
    async def test_save_and_get(self, integration_container):
        # Arrange
        note = ModerationNote(
            comment_id=CommentId("12"),
            text="Student asked for a refund",
            updated_at=datetime(2024, 3, 1, 12, 0),
        )

        # Act
        async with integration_container() as request:
            repo = await request.get(NoteRepository)
            await repo.save(note)

        async with integration_container() as request:
            repo = await request.get(NoteRepository)
            found = await repo.get(CommentId("12"))

        # Assert
        assert found is not None
        assert found.comment_id == "12"
        assert found.text == "Student asked for a refund"

    @pytest.mark.asyncio
    async def test_save_replaces_existing(self, integration_container):
        async with integration_container() as request:
            service = await request.get(NoteService)
            await service.save_note(CommentId("12"), "first")
            await service.save_note(CommentId("12"), "second")

        async with integration_container() as request:
            service = await request.get(NoteService)
            note = await service.get_note(CommentId("12"))

        assert note.text == "second"

    @pytest.mark.asyncio
    async def test_blank_note_is_deleted(self, integration_container):
        async with integration_container() as request:
            service = await request.get(NoteService)
            await service.save_note(CommentId("12"), "temporary")

        async with integration_container() as request:
            service = await request.get(NoteService)
            await service.save_note(CommentId("12"), "  ")

        async with integration_container() as request:
            repo = await request.get(NoteRepository)
            assert await repo.get(CommentId("12")) is None
