"""One page of a paginated backend list."""

from typing import Generic, TypeVar

from pydantic import Field

from ead.domain.model.common import DomainModel

T = TypeVar("T")


class Page(DomainModel, Generic[T]):
    """A single page of results.

    ``last_page`` is the backend's view of how many pages exist at the time
    the page was served.
    """

    items: list[T] = Field(default_factory=list)
    current_page: int = Field(default=1, ge=1)
    last_page: int = Field(default=1, ge=1)
    total: int | None = None

    @property
    def has_more(self) -> bool:
        return self.current_page < self.last_page
