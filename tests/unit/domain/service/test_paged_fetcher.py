"""Unit tests for PagedFetcher."""

import pytest

from ead.domain.error import FetchAbortedError, PageLimitExceededError
from ead.domain.service import AbortSignal, PagedFetcher
from tests.conftest import make_comment, make_page


def paged_backend(sizes: list[int]):
    """Fake page function serving ``sizes[i]`` items on page i + 1."""
    calls: list[int] = []
    pages = []
    next_id = 1
    for size in sizes:
        pages.append([make_comment(next_id + i) for i in range(size)])
        next_id += size

    async def fetch(page: int):
        calls.append(page)
        return make_page(pages[page - 1], current_page=page, last_page=len(sizes))

    return fetch, calls


class TestFetchAll:
    """Tests for fetch_all method."""

    @pytest.mark.asyncio
    async def test_concatenates_pages_in_order(self):
        """Three pages of 10, 10 and 4 items yield 24 items in page order."""
        # Arrange
        fetch, calls = paged_backend([10, 10, 4])

        # Act
        items = await PagedFetcher().fetch_all(fetch)

        # Assert
        assert len(items) == 24
        assert [c.id for c in items] == [str(i) for i in range(1, 25)]
        assert calls == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_single_page(self):
        """A single page is requested once."""
        fetch, calls = paged_backend([3])

        items = await PagedFetcher().fetch_all(fetch)

        assert len(items) == 3
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_empty_first_page(self):
        """An empty list reports one page and yields nothing."""
        fetch, calls = paged_backend([0])

        items = await PagedFetcher().fetch_all(fetch)

        assert items == []
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_failure_propagates_without_partial_result(self):
        """A failing page makes the whole accumulation fail."""
        # Arrange
        fetch, calls = paged_backend([2, 2, 2])

        async def failing(page: int):
            if page == 2:
                raise RuntimeError("backend down")
            return await fetch(page)

        # Act / Assert
        with pytest.raises(RuntimeError, match="backend down"):
            await PagedFetcher().fetch_all(failing)
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_abort_between_pages(self):
        """Aborting after page 1 stops before page 2 is requested."""
        # Arrange
        fetch, calls = paged_backend([2, 2, 2])
        signal = AbortSignal()

        async def aborting(page: int):
            result = await fetch(page)
            if page == 1:
                signal.abort()
            return result

        # Act
        with pytest.raises(FetchAbortedError) as exc_info:
            await PagedFetcher().fetch_all(aborting, abort=signal)

        # Assert
        assert exc_info.value.pages_loaded == 1
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_already_aborted_signal_requests_nothing(self):
        """A signal aborted before the call prevents any request."""
        fetch, calls = paged_backend([1])
        signal = AbortSignal()
        signal.abort()

        with pytest.raises(FetchAbortedError):
            await PagedFetcher().fetch_all(fetch, abort=signal)
        assert calls == []

    @pytest.mark.asyncio
    async def test_more_pages_than_allowed_fails(self):
        """A backend reporting more than max_pages pages yields no result."""
        # Arrange
        fetch, calls = paged_backend([1, 1, 1, 1, 1])

        # Act
        with pytest.raises(PageLimitExceededError) as exc_info:
            await PagedFetcher(max_pages=2).fetch_all(fetch, resource="replies")

        # Assert
        assert exc_info.value.last_page == 5
        assert exc_info.value.max_pages == 2
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_exactly_max_pages_is_complete(self):
        """A list with exactly max_pages pages is loaded in full."""
        fetch, calls = paged_backend([1, 1])

        items = await PagedFetcher(max_pages=2).fetch_all(fetch)

        assert len(items) == 2
        assert calls == [1, 2]
