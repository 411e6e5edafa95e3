"""
Database engine configuration.

This module handles engine creation and scoped engine lifetime using
SQLAlchemy. The engine is the single storage handle shared by all
callers of a ParcelStore; its pool owns the connections.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from parcel_tracker.app.core.config import settings

# Create declarative base for models
Base = declarative_base()


def create_db_engine(database_url: Optional[str] = None, **engine_kwargs) -> Engine:
    """
    Create a SQLAlchemy engine from settings.

    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    url = make_url(database_url or settings.database_url)
    options = {"echo": settings.db_echo, "future": True}
    if url.get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    options.update(engine_kwargs)
    return create_engine(url, **options)


def init_db(engine: Engine) -> None:
    """Create the parcel table if it is missing (non-destructive)."""
    # Import models to ensure they are registered with Base
    from parcel_tracker.app.models.parcel import ParcelRecord  # noqa: F401

    Base.metadata.create_all(engine)


@contextmanager
def open_engine(database_url: Optional[str] = None, **engine_kwargs) -> Iterator[Engine]:
    """
    Open an engine with the schema in place and dispose it on exit.

    Whoever opens the engine owns it; stores built on it never close it.
    """
    engine = create_db_engine(database_url, **engine_kwargs)
    try:
        init_db(engine)
        yield engine
    finally:
        engine.dispose()
