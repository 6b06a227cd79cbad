"""Commit helpers that turn storage failures into domain errors."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from discipleship.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def commit_or_raise(session: Session, action: str) -> None:
    """Commit ``session`` or roll back and raise :class:`PersistenceError`."""

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database rejected attempt to %s: %s", action, exc)
        raise PersistenceError(f"Could not {action}") from exc


def flush_or_raise(session: Session, action: str) -> None:
    """Flush pending changes without committing the transaction."""

    try:
        session.flush()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database rejected attempt to %s: %s", action, exc)
        raise PersistenceError(f"Could not {action}") from exc


__all__ = ["commit_or_raise", "flush_or_raise"]
