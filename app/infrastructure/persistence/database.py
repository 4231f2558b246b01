"""Persistence: async engines, session factories, and Base for SQLAlchemy ORM.

Database holds two pools: a writer (DATABASE_URL) and a reader
(DATABASE_READER_URL, falling back to the writer when unset). One instance is
built per process by create_app() and kept on the application context; there
is no module-level engine.

Engines are created lazily on first use so that building the app does not
require the database driver to connect (or be importable) until a request
actually needs a session.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _engine_kwargs(settings: Settings, url: str) -> dict[str, Any]:
    """Pool and driver options; SQLite takes none of the pool options."""
    kwargs: dict[str, Any] = {"echo": settings.database_echo}
    if _is_sqlite(url):
        return kwargs
    kwargs.update(
        pool_pre_ping=True,
        pool_size=settings.db_pool_size if settings.db_pool_size is not None else 10,
        max_overflow=(
            settings.db_max_overflow if settings.db_max_overflow is not None else 20
        ),
        pool_recycle=3600,
    )
    if "asyncpg" in url:
        kwargs["connect_args"] = {
            "command_timeout": settings.db_operation_timeout_seconds
        }
    return kwargs


def _session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


class Database:
    """Writer and reader pools plus their session factories."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._writer_engine: AsyncEngine | None = None
        self._reader_engine: AsyncEngine | None = None
        self._writer_sessions: async_sessionmaker[AsyncSession] | None = None
        self._reader_sessions: async_sessionmaker[AsyncSession] | None = None

    def _ensure_engines(self) -> None:
        """Create engines and session factories on first use."""
        if self._writer_engine is not None:
            return
        writer_url = self.settings.database_url
        self._writer_engine = create_async_engine(
            writer_url, **_engine_kwargs(self.settings, writer_url)
        )
        reader_url = self.settings.database_reader_url
        if reader_url and reader_url != writer_url:
            self._reader_engine = create_async_engine(
                reader_url, **_engine_kwargs(self.settings, reader_url)
            )
        else:
            self._reader_engine = self._writer_engine
        self._writer_sessions = _session_factory(self._writer_engine)
        self._reader_sessions = _session_factory(self._reader_engine)
        logger.info(
            "Database pools ready (separate reader: %s)",
            self._reader_engine is not self._writer_engine,
        )

    @property
    def writer_engine(self) -> AsyncEngine:
        self._ensure_engines()
        assert self._writer_engine is not None
        return self._writer_engine

    @asynccontextmanager
    async def reader_session(self) -> AsyncIterator[AsyncSession]:
        """Session on the reader pool. Does not commit."""
        self._ensure_engines()
        assert self._reader_sessions is not None
        async with self._reader_sessions() as session:
            yield session

    @asynccontextmanager
    async def writer_session(self) -> AsyncIterator[AsyncSession]:
        """Session on the writer pool inside a transaction.

        Commits on success, rolls back on exception.
        """
        self._ensure_engines()
        assert self._writer_sessions is not None
        async with self._writer_sessions() as session:
            async with session.begin():
                yield session

    async def create_all(self) -> None:
        """Create all tables (development and tests; there are no migrations)."""
        from app.infrastructure.persistence import models  # noqa: F401  (register mappers)

        async with self.writer_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close both pools. Safe to call when engines were never created."""
        if self._reader_engine is not None and self._reader_engine is not self._writer_engine:
            await self._reader_engine.dispose()
        if self._writer_engine is not None:
            await self._writer_engine.dispose()
        self._writer_engine = self._reader_engine = None
        self._writer_sessions = self._reader_sessions = None
