"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a mock implementation for tests:
#   ead_api - the school backend (HTTP gateway vs in-memory fake)
#   persistence - the moderation notes store (SQL vs in-memory)
Component = Literal["ead_api", "persistence"]


class ProviderBase(Provider):
    """Base for all providers of the comments service.

    Attributes:
        __mock_component__: Component a mockable base stands for; None for
            providers that are always used as-is
        __is_mock__: Whether a subclass is the test implementation
        __depends_on__: Components that must also be real when this one is
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[frozenset[Component]] = frozenset()
