"""Helper utilities shared across API route handlers."""

import logging

from fastapi import HTTPException, status

from discipleship.domain.exceptions import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    PersistenceError,
    SelfJoinError,
    ValidationError,
    WeekLockedError,
)

logger = logging.getLogger(__name__)

# Checked in order, so subclasses come before their parents.
_STATUS_BY_ERROR: tuple[tuple[type[ValueError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (SelfJoinError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (WeekLockedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def status_for_error(exc: ValueError) -> int:
    """Return the HTTP status code reported for ``exc``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(exc: ValueError) -> HTTPException:
    """Translate a domain error raised by a use case into an ``HTTPException``."""

    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.error("Storage failure while handling request: %s", exc)
        return HTTPException(status_code=status_code, detail="Could not complete the request")
    return HTTPException(status_code=status_code, detail=str(exc))
