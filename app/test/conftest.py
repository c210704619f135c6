"""
Pytest configuration and fixtures.

Database fixtures are opt-in: pure calculator and ranker tests run without a
database, while API and repository tests pull the database in through
``test_async_client`` or ``test_db_session``.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from app.core.config import ConfigFile, get_config
from app.create_app import get_app
from app.database import Base
from app.database.base import engine_kw, get_db_url
from app.database.session_manager.db_session import Database
from app.utils.constants import IdentityHeader

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

TEST_USER_ID = "test-user"


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration with test database settings.
    """
    return get_config(ConfigFile.TEST)


@pytest_asyncio.fixture
async def db_cleanup(test_config):
    """
    Recreate all tables before a test and drop them afterwards.
    """
    test_engine = create_async_engine(get_db_url(test_config), poolclass=NullPool)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await test_engine.dispose()


@pytest_asyncio.fixture
async def initialize_db_session(test_config, db_cleanup):
    """
    Initialize the Database session manager on the test database.
    """
    Database.init(get_db_url(test_config), engine_kw=engine_kw)

    yield

    await Database.dispose()


@pytest_asyncio.fixture
async def test_app(initialize_db_session):
    """
    Create FastAPI application with test configuration.
    """
    yield get_app(ConfigFile.TEST)


@pytest_asyncio.fixture
async def test_async_client(test_app):
    """
    Async HTTP client authenticated as TEST_USER_ID.

    Uses httpx AsyncClient with ASGITransport for testing FastAPI endpoints.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport,
        base_url="http://localhost:8000",
        follow_redirects=True,
        headers={IdentityHeader.USER_ID: TEST_USER_ID},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def anonymous_client(test_app):
    """Async HTTP client without identity headers."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def test_db_session(initialize_db_session):
    """
    Provide database session for tests.
    """
    async with Database() as session:
        yield session
