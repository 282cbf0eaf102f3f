"""Abort signal for superseded fetches."""

from ead.domain.error import FetchAbortedError


class AbortSignal:
    """Cooperative cancellation flag for one ``fetch_all`` invocation.

    The event loop is single-threaded, so a plain flag is enough: the
    fetcher checks it between awaits and stops before writing anything.
    """

    def __init__(self) -> None:
        self._aborted = False
        self.reason: str | None = None

    @property
    def aborted(self) -> bool:
        return self._aborted

    def abort(self, reason: str = "superseded") -> None:
        """Mark the signal as aborted. Idempotent; the first reason is kept."""
        if not self._aborted:
            self._aborted = True
            self.reason = reason

    def raise_if_aborted(self, pages_loaded: int = 0) -> None:
        """Raise FetchAbortedError if the signal has been aborted."""
        if self._aborted:
            raise FetchAbortedError(pages_loaded)
