"""Database initialization and dependency injection."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

import fastapi
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.user.models  # noqa: F401
import components.category.models  # noqa: F401
import components.transaction.models  # noqa: F401

logger = logging.getLogger(__name__)


def get_db_manager(request: Request) -> DatabaseManager:
    """FastAPI dependency returning the storage handle attached to the app."""
    return request.app.state.db_manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    async with get_db_manager(request).get_db() as session:
        yield session


def init_db(app: fastapi.FastAPI, db_manager: DatabaseManager) -> None:
    """Attach the storage handle to the application."""
    app.state.db_manager = db_manager


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI) -> AsyncIterator[None]:
    """Acquire the storage handle at startup and release it at shutdown."""
    engine_url = app.state.db_manager.engine.url
    logger.info("Starting with database %s", engine_url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        await app.state.db_manager.dispose()
