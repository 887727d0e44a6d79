"""
Humans API — Database Engine & Session Factories
==================================================

What:  Builders for the async SQLAlchemy engine and session factory, plus the
       declarative Base shared by all ORM models.
Why:   Keeps connection and pooling policy in one place. Nothing here is a
       process-wide singleton: HumanStore calls these builders and owns the
       resulting engine, so tests can point a store at SQLite instead.
How:   create_async_engine() with a pooled asyncpg connection for PostgreSQL,
       or the default aiosqlite pool for SQLite URLs.

Connection Pooling Strategy (PostgreSQL):
    pool_size:         Persistent connections for normal load
    max_overflow:      Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour

    The pool is safe for concurrent use by many in-flight requests; that is
    the only piece of state handlers share.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def build_engine(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 5,
    pool_pre_ping: bool = True,
    echo: bool = False,
) -> AsyncEngine:
    """
    Create the async engine for the given URL.

    SQLite drivers don't take QueuePool sizing arguments, so they only
    get the URL and the echo flag.
    """
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)

    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=pool_pre_ping,
        pool_recycle=3600,
        echo=echo,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the engine.

    expire_on_commit=False: returned ORM objects stay readable after the
    session that loaded them has committed and closed.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
