"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ead.domain.repository import NoteRepository
from ead.persistence.repository.inmemory import InMemoryNoteRepository
from ead.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory note repository.

    APP scope so that notes survive across requests of one container; each
    test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_note_repository(self) -> NoteRepository:
        """Provide in-memory note repository."""
        return InMemoryNoteRepository()
