"""
Database Configuration and Session Management

Async SQLAlchemy engine and session management for the user, skill and
job catalog stores.
"""

from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import text

from app.core.config import get_settings
from app.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


class DatabaseManager:
    """Database connection and session management."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        """
        Initialize database manager.

        Args:
            database_url: Overrides the configured DATABASE_URL
        """
        self._database_url = database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def database_url(self) -> str:
        return self._database_url or get_settings().DATABASE_URL

    @property
    def engine(self) -> AsyncEngine:
        """Get database engine."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get session factory."""
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call init_database() first.")
        return self._session_factory

    async def init_database(self) -> None:
        """Initialize database connections and create tables."""
        settings = get_settings()
        try:
            engine_kwargs = {
                "echo": settings.DEBUG,
            }

            # SQLite-specific configuration
            if self.database_url.startswith("sqlite"):
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
            else:
                engine_kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
                engine_kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW

            self._engine = create_async_engine(self.database_url, **engine_kwargs)

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            await self._test_database_connection()
            await self.create_tables()

            logger.info("Database initialized", url=self._safe_url())

        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    def _safe_url(self) -> str:
        """Database URL without credentials, for logs."""
        url = self.database_url
        if "@" in url:
            scheme, _, rest = url.partition("://")
            return f"{scheme}://***@{rest.split('@', 1)[1]}"
        return url

    async def _test_database_connection(self) -> None:
        """Test database connection."""
        async with self._engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create database tables."""
        # Models must be imported so their tables are registered on Base
        import app.models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close_connections(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            logger.info("Database engine disposed")
        self._engine = None
        self._session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Transactional session scope.

        Commits on success and rolls back if the block raises.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


# Global database manager instance
db_manager = DatabaseManager()
