"""Shared pytest fixtures for finance tracker tests."""

import httpx
import pytest

from components.core.config import Settings
from components.core.database import DatabaseManager
from restapi.router import create_app
from tests.helpers import CRON_SECRET


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        DB_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        CRON_SECRET=CRON_SECRET,
        TIMEZONE="UTC",
        RECURRING_CONCURRENCY=1,
    )


@pytest.fixture
async def db_manager(settings):
    """Create a database with all tables."""
    manager = DatabaseManager(settings=settings)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def session(db_manager):
    async with db_manager.get_db() as session:
        yield session


@pytest.fixture
async def client(db_manager, settings):
    """HTTP client bound to an app using the test database."""
    app = create_app(db_manager=db_manager, settings=settings)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
