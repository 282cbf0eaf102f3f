"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import HTTPException, status

from ead.adapter.error import CommentApiError
from ead.domain.error import (
    FetchAbortedError,
    InvalidTransitionError,
    NotFoundError,
    PageLimitExceededError,
    PolicyViolationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnsupportedActionError(InterfaceError):
    """Request names an action the endpoint does not perform."""

    pass


def to_http_exception(error: Exception) -> HTTPException:
    """Map a domain or adapter error to the HTTP error returned to clients.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route

    Raises:
        Exception: ``error`` itself when it has no HTTP mapping
    """
    if isinstance(error, PolicyViolationError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "reason": error.rejection.reason.value,
                "message": error.rejection.message,
            },
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (InvalidTransitionError, FetchAbortedError)):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, PageLimitExceededError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error)
        )
    if isinstance(error, UnsupportedActionError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, CommentApiError):
        if error.status_code == status.HTTP_404_NOT_FOUND:
            return HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(error)
            )
        logfire.error(
            "Backend call failed", error=str(error), status_code=error.status_code
        )
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"EAD backend error: {error}",
        )
    raise error
