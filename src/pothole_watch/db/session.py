"""Database session configuration."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from pothole_watch.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import pothole_watch.models  # noqa: E402,F401


def _connect_args(url: str, timeout: float) -> dict[str, Any]:
    """Bound how long a driver may wait when connecting or on a locked database."""
    if url.startswith("sqlite"):
        return {"timeout": timeout, "check_same_thread": False}
    if url.startswith("postgresql"):
        return {"connect_timeout": int(timeout)}
    return {}


def build_engine(url: str, *, timeout: float, echo: bool = False):
    """Create an engine whose pool checkout and connect calls are time-bounded."""
    kwargs: dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": echo,
        "connect_args": _connect_args(url, timeout),
    }
    if not url.startswith("sqlite"):
        kwargs["pool_timeout"] = timeout
    return create_engine(url, **kwargs)


engine = build_engine(
    settings.database_url,
    timeout=settings.database_timeout_seconds,
    echo=settings.sql_debug,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=engine)
