"""
Humans API — Human Store (Persistence Gateway)
================================================

What:  The only component that talks SQL. Wraps the `humans` table behind
       five operations plus the startup bootstrap.
Why:   Routes stay HTTP-only; the store decides what counts as "not found"
       versus a real failure, and nothing else in the app needs to know
       about SQLAlchemy.
How:   Owns an AsyncEngine and a session factory. Every operation opens its
       own session, executes exactly one statement, commits, and returns the
       connection to the pool.
Who:   Constructed once at startup (HumanStore.from_settings) and attached to
       the FastAPI app; tests build one against SQLite or replace it with a mock.

Outcome Conventions:
    get_human()     → Human | None      (None = no row matched)
    update_human()  → bool              (False = no row matched)
    delete_human()  → bool              (False = no row matched)
    any SQL failure → DatabaseError     (never None / False)
    bootstrap error → DatabaseConnectionError

Identifiers:
    Path ids arrive as opaque strings. parse_id() turns them into a key for
    the INTEGER id column; anything that can't be one (non-numeric, or out of
    the 32-bit range) is treated as "no row matched" without touching the
    database.
"""

import asyncio
import logging
import re
from typing import List, Optional, Union

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from humans_api.config import Settings
from humans_api.database import Base, build_engine, build_session_factory
from humans_api.exceptions import DatabaseConnectionError, DatabaseError
from humans_api.models.human import Human

logger = logging.getLogger(__name__)

# Range of the INTEGER / SERIAL id column
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Failures raised by drivers while connecting or querying
_DB_FAILURES = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def parse_id(raw: Union[str, int]) -> Optional[int]:
    """
    Coerce a path identifier into a row key.

    Returns None when the value cannot identify any row.

    >>> parse_id("42")
    42
    >>> parse_id("abc") is None
    True
    """
    candidate = str(raw).strip()
    if not _ID_PATTERN.fullmatch(candidate):
        return None
    value = int(candidate)
    if not _MIN_ID <= value <= _MAX_ID:
        return None
    return value


class HumanStore:
    """
    Gateway to the `humans` table.

    Thread/task safety:
        The instance holds no per-request state. Concurrency is delegated to
        the engine's connection pool and the database's own isolation; two
        concurrent updates to the same row race and the last commit wins.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
    ):
        self.engine = engine
        self._session_factory = session_factory or build_session_factory(engine)

    @classmethod
    def from_settings(cls, config: Settings) -> "HumanStore":
        """Build a store (engine + pool) from application settings."""
        engine = build_engine(
            config.database_url,
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_pre_ping=config.db_pool_pre_ping,
            echo=config.log_level == "DEBUG",
        )
        return cls(engine)

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def bootstrap(self) -> None:
        """
        Create the humans table if it does not exist.

        Idempotent: create_all() checks for the table first, so calling this
        on every startup (or twice in a row) leaves the schema unchanged.

        Raises:
            DatabaseConnectionError: database unreachable or DDL rejected.
                Callers must treat this as fatal.
        """
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except _DB_FAILURES as e:
            logger.error("Failed to create table: %s", str(e))
            raise DatabaseConnectionError(
                message="Failed to create table",
                context={"error_type": type(e).__name__},
            ) from e
        logger.info("Table '%s' is ready", Human.__tablename__)

    async def ping(self) -> bool:
        """Lightweight connectivity check used by the health route."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except _DB_FAILURES as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()

    # ── Operations ────────────────────────────────────────────────────────

    async def list_humans(self) -> List[Human]:
        """
        Every stored human. Order is whatever the database returns.

        Empty table → empty list.
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Human))
                humans = list(result.scalars().all())
        except _DB_FAILURES as e:
            raise self._query_failure("Failed to retrieve users", "list", e)
        logger.debug("Listed %d humans", len(humans))
        return humans

    async def get_human(self, human_id: Union[str, int]) -> Optional[Human]:
        key = parse_id(human_id)
        if key is None:
            return None
        try:
            async with self._session_factory() as session:
                return await session.get(Human, key)
        except _DB_FAILURES as e:
            raise self._query_failure("Failed to retrieve user", "get", e, human_id)

    async def create_human(self, first_name: str, last_name: str) -> Human:
        """
        Insert a new row and return it with its assigned id.

        There is no duplicate detection; identical names produce separate rows.
        """
        human = Human(first_name=first_name, last_name=last_name)
        try:
            async with self._session_factory() as session:
                session.add(human)
                await session.commit()
        except _DB_FAILURES as e:
            raise self._query_failure("Failed to create user", "create", e)
        logger.debug("Created human %s", human.id)
        return human

    async def update_human(
        self, human_id: Union[str, int], first_name: str, last_name: str
    ) -> bool:
        """
        Overwrite both names of the row at `human_id`.

        Returns:
            True if a row matched, False if none did.
        """
        key = parse_id(human_id)
        if key is None:
            return False
        statement = (
            update(Human)
            .where(Human.id == key)
            .values({Human.first_name: first_name, Human.last_name: last_name})
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                await session.commit()
        except _DB_FAILURES as e:
            raise self._query_failure("Failed to update user", "update", e, human_id)
        return result.rowcount > 0

    async def delete_human(self, human_id: Union[str, int]) -> bool:
        """Remove the row at `human_id`. Same affected-rows convention as update."""
        key = parse_id(human_id)
        if key is None:
            return False
        statement = (
            delete(Human)
            .where(Human.id == key)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                await session.commit()
        except _DB_FAILURES as e:
            raise self._query_failure("Failed to delete user", "delete", e, human_id)
        return result.rowcount > 0

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _query_failure(
        message: str,
        operation: str,
        error: Exception,
        human_id: Optional[Union[str, int]] = None,
    ) -> DatabaseError:
        logger.error("Database error during %s (id=%s): %s", operation, human_id, str(error))
        context = {"operation": operation, "error_type": type(error).__name__}
        if human_id is not None:
            context["human_id"] = str(human_id)
        return DatabaseError(message=message, context=context)
