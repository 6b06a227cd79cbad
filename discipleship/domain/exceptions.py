"""Errors raised by the pairing and progress rules.

Every error derives from :class:`ValueError` so callers that only handle
``ValueError`` keep reporting them as bad requests.
"""

from __future__ import annotations


class DomainError(ValueError):
    """Base class for errors reported to the caller."""


class NotFoundError(DomainError):
    """The requested record does not exist or is no longer usable."""


class SelfJoinError(DomainError):
    """A leader tried to redeem the invite code of their own pairing."""


class ConflictError(DomainError):
    """A concurrent writer won the race or the state no longer allows the change."""


class PersistenceError(DomainError):
    """The store rejected the operation."""


class PermissionDeniedError(PersistenceError):
    """The caller is not allowed to touch the requested rows."""


class ValidationError(DomainError):
    """Input was malformed."""


class WeekLockedError(ValidationError):
    """The requested curriculum week has not been unlocked yet."""


__all__ = [
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "PermissionDeniedError",
    "PersistenceError",
    "SelfJoinError",
    "ValidationError",
    "WeekLockedError",
]
