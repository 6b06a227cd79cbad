"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from discipleship.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

_LEGACY_POSTGRES_SCHEME = "postgres://"


def normalize_database_url(raw_url: str) -> str:
    """Return ``raw_url`` in a form SQLAlchemy accepts.

    Hosted Postgres providers still hand out ``postgres://`` URLs, a scheme
    SQLAlchemy no longer recognises.
    """

    url = raw_url.strip()
    if url.startswith(_LEGACY_POSTGRES_SCHEME):
        logger.debug("Rewriting legacy postgres:// database URL scheme")
        return "postgresql://" + url[len(_LEGACY_POSTGRES_SCHEME) :]
    return url


def build_engine(settings: Settings):
    """Create the SQLAlchemy engine for the configured database."""

    url = normalize_database_url(settings.database_url)
    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        # Sessions are used from FastAPI's worker threads.
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from discipleship.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
