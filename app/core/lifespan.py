"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring. Used by main.py; no business
logic here. The database pools live on app.state.context and are disposed
on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.context import AppContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup creates tables only when DATABASE_CREATE_TABLES is set (local
    development). Shutdown disposes the reader and writer pools.
    """
    context: AppContext = app.state.context
    settings = context.settings

    # ---- Startup ----
    if settings.database_create_tables:
        await context.database.create_all()
        logger.info("Database tables ensured")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await context.database.dispose()
    logger.info("Database pools disposed")
