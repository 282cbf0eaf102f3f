"""Accumulate every page of a paginated resource."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

import logfire

from ead.domain.error import PageLimitExceededError
from ead.domain.model import Page
from ead.domain.service.abort import AbortSignal

from .base import Service

T = TypeVar("T")

class PagedFetcher(Service):
    """Loads all pages of a list into one in-memory list.

    Pages are requested strictly one after another: ``last_page`` is only
    known once page 1 resolves, and items must come out in page order.
    """

    def __init__(self, max_pages: int = 1000) -> None:
        """Initialize paged fetcher.

        Args:
            max_pages: Upper bound on pages requested by one accumulation
        """
        self.max_pages = max_pages

    async def fetch_all(
        self,
        page_fetch: Callable[[int], Awaitable[Page[T]]],
        *,
        abort: AbortSignal | None = None,
        resource: str = "resource",
    ) -> list[T]:
        """Fetch page 1, then pages 2..last_page, concatenating items.

        Args:
            page_fetch: Coroutine function returning the requested page
            abort: Optional signal; when aborted the accumulation stops
            resource: Name used in logs

        Returns:
            Items of every page, in page order

        Raises:
            FetchAbortedError: If ``abort`` fired before completion
            PageLimitExceededError: If the backend reports more than
                ``max_pages`` pages
            Exception: Whatever ``page_fetch`` raised; no partial result is
                returned
        """
        with self.span("fetch_all", resource=resource):
            if abort:
                abort.raise_if_aborted(0)

            first = await page_fetch(1)
            if abort:
                abort.raise_if_aborted(1)

            items: list[T] = list(first.items)
            last_page = first.last_page
            if last_page > self.max_pages:
                logfire.warn(
                    "Backend reported more pages than allowed",
                    resource=resource,
                    last_page=last_page,
                    max_pages=self.max_pages,
                )
                raise PageLimitExceededError(resource, last_page, self.max_pages)

            for page in range(2, last_page + 1):
                if abort:
                    abort.raise_if_aborted(page - 1)
                result = await page_fetch(page)
                if abort:
                    abort.raise_if_aborted(page)
                items.extend(result.items)

            logfire.info(
                "All pages fetched",
                resource=resource,
                pages=max(last_page, 1),
                count=len(items),
            )
            return items
