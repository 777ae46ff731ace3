"""Core classes and mixins for DB connections"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import declarative_base

from components.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseManager:
    """Owns the engine and session factory for the lifetime of the process."""

    def __init__(
        self,
        engine: Optional[AsyncEngine] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize DatabaseManager with optional engine for testing."""
        self.settings = settings or get_settings()
        self.engine = engine or self._create_engine()
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    def _create_engine(self) -> AsyncEngine:
        """Create async engine from configured database URL."""
        url = self.settings.async_db_url
        if url.startswith("sqlite"):
            return create_async_engine(url, echo=self.settings.DB_ECHO)
        return create_async_engine(
            url,
            echo=self.settings.DB_ECHO,
            pool_pre_ping=True,  # Enable connection health checks
            pool_size=self.settings.DB_POOL_SIZE,
            max_overflow=self.settings.DB_MAX_OVERFLOW,
        )

    @asynccontextmanager
    async def get_db(self) -> AsyncIterator[AsyncSession]:
        """Get database session context manager."""
        async with self.session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    async def create_schema(self) -> None:
        """Create all tables known to the ORM metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")
