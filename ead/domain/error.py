"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class PolicyViolationError(ValidationError):
    """Raised when a write is refused because it fails the reply policy.

    Carries the typed rejection so callers can surface the reason.
    """

    def __init__(self, rejection):
        self.rejection = rejection
        super().__init__(rejection.message)


class InvalidTransitionError(DomainError):
    """Raised when a moderation action is not allowed from a status."""

    def __init__(self, comment_id: str, status: str, action: str):
        self.comment_id = comment_id
        self.status = status
        self.action = action
        super().__init__(f"Cannot {action} comment {comment_id} in status {status}")


class FetchAbortedError(DomainError):
    """Raised when a paged accumulation is aborted before completing."""

    def __init__(self, pages_loaded: int):
        self.pages_loaded = pages_loaded
        super().__init__(f"Fetch aborted after {pages_loaded} page(s)")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PageLimitExceededError(DomainError):
    """Raised when a paginated resource has more pages than may be loaded."""

    def __init__(self, resource: str, last_page: int, max_pages: int):
        self.resource = resource
        self.last_page = last_page
        self.max_pages = max_pages
        super().__init__(
            f"{resource} has {last_page} pages, more than the limit of {max_pages}"
        )
