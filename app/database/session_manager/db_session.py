"""
Async database session manager.

Holds a process-wide session maker initialised once at startup and hands out
sessions through an async context manager.
"""
import logging

from sqlalchemy.engine.url import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.database.session_manager.exceptions import (
    DatabaseNotInitialized,
    DatabaseTransactionError,
)

logger = logging.getLogger(__name__)


class Database:
    """
    Session manager used as ``async with Database() as session``.

    The session is committed when the block exits cleanly and rolled back
    when it raises.
    """

    _async_engine: AsyncEngine | None = None
    _async_session_maker: sessionmaker | None = None

    def __init__(self):
        self._session: AsyncSession | None = None

    @classmethod
    def init(cls, async_db_url: URL, engine_kw: dict | None = None):
        """
        Create the engine and session maker.

        Args:
            async_db_url: asyncpg database URL
            engine_kw: Extra keyword arguments for ``create_async_engine``
        """
        cls._async_engine = create_async_engine(async_db_url, **(engine_kw or {}))
        cls._async_session_maker = sessionmaker(
            bind=cls._async_engine, expire_on_commit=False, class_=AsyncSession
        )
        logger.debug(f"Database initialised for {async_db_url.render_as_string()}")

    @classmethod
    async def dispose(cls):
        """Close all pooled connections."""
        if cls._async_engine is not None:
            await cls._async_engine.dispose()
        cls._async_engine = None
        cls._async_session_maker = None

    async def __aenter__(self) -> AsyncSession:
        if self._async_session_maker is None:
            raise DatabaseNotInitialized(
                "Database not initialized. Call Database.init() first."
            )
        self._session = self._async_session_maker()
        return self._session

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is not None:
                await self._session.rollback()
                return

            try:
                await self._session.commit()
            except SQLAlchemyError as e:
                await self._session.rollback()
                logger.error(f"Failed to commit transaction: {e}")
                raise DatabaseTransactionError(str(e)) from e
        finally:
            await self._session.close()
