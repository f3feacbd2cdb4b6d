"""
SQLAlchemy engine and session plumbing.

Builds the engine from the configured URL and exposes the declarative
base shared by the catalog persistence records. SQLite connections get
foreign key enforcement switched on so both supported backends reject
dangling references the same way.
"""

import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for persistence records."""


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for ``database_url``.

    In-memory SQLite URLs share one connection across threads, otherwise
    every pooled connection would see its own empty database.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(database_url, echo=echo, pool_pre_ping=True)

    logger.info("Database engine created for dialect=%s", engine.dialect.name)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    """Create any missing catalog tables."""
    # Records must be imported so their tables are registered on Base.
    from ticket_catalog.infrastructure.catalog import records  # noqa: F401

    Base.metadata.create_all(engine)
