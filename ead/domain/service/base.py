"""Base service class for domain services."""

import re

import logfire


class Service:
    """Base class for all domain services.

    Spans opened through ``span`` are named after the concrete class, e.g.
    ``moderation_service.load_full_thread``.
    """

    def span(self, operation: str, **attributes):
        """Open a logfire span for one operation of this service."""
        return logfire.span(f"{_span_prefix(type(self))}.{operation}", **attributes)


def _span_prefix(cls: type) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", cls.__name__).lower()
