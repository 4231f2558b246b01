"""Application context and database session dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.context import AppContext


def get_app_context(request: Request) -> AppContext:
    """AppContext built by create_app() and stored on app.state."""
    return request.app.state.context


def get_settings_dep(
    context: Annotated[AppContext, Depends(get_app_context)],
) -> Settings:
    return context.settings


async def get_db(
    context: Annotated[AppContext, Depends(get_app_context)],
) -> AsyncGenerator[AsyncSession, None]:
    """Read-only session on the reader pool (no commit)."""
    async with context.database.reader_session() as session:
        yield session


async def get_db_transactional(
    context: Annotated[AppContext, Depends(get_app_context)],
) -> AsyncGenerator[AsyncSession, None]:
    """Writer session; commits when the route returns, rolls back on error."""
    async with context.database.writer_session() as session:
        yield session
