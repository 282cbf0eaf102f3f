"""Mock providers for testing."""

from .ead_api import MockEadApiProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockEadApiProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
