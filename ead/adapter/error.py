"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class CommentApiError(ProviderError):
    """EAD backend request failed.

    ``status_code`` is None for transport errors (timeouts, refused
    connections, unreadable bodies).
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
