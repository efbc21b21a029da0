"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 as the backing store for the Book Store API.

In-Memory Store
===============
By default the store is an in-memory SQLite database. An in-memory SQLite
database normally lives only as long as the connection that created it, so
the engine is built with a StaticPool: every session shares one connection
and therefore one database. The data disappears when the engine is disposed.

Ownership
=========
There is no module-level engine. create_app() builds the engine and the
session factory inside the application lifespan and keeps them on app.state.
Each request gets its own session through the get_db() dependency.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all store operations in that request
3. Close session when request ends
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    The Base class provides the mapper registry; create_tables() uses its
    metadata to build the schema of a freshly created store.
    """
    pass


# =============================================================================
# Engine and Session Factory
# =============================================================================
def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for the book store.

    SQLite URLs get check_same_thread=False because FastAPI runs sync
    handlers in a threadpool. In-memory SQLite additionally gets a
    StaticPool so the whole process shares a single database.

    Args:
        database_url: SQLAlchemy connection URL
        echo: Log all SQL statements

    Returns:
        Configured Engine instance
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=echo,
            )
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            echo=echo,
        )

    return create_engine(url, pool_pre_ping=True, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create a session factory bound to the given engine.

    - autocommit=False: We control when to commit
    - autoflush=False: Don't auto-flush before queries
    """
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Opens a session from the factory owned by the running application and
    closes it when the request ends (in the finally block).

    Yields:
        SQLAlchemy Session instance
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables(engine: Engine) -> None:
    """Create all tables in the store."""
    Base.metadata.create_all(bind=engine)

