"""Database connection and session management for PostgreSQL using SQLAlchemy with async support."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)

from .config import get_global_settings


class DatabaseManager:
    """Database connection and session manager.

    The engine is created on first use so importing the application does not
    require a reachable database or an installed driver.
    """

    def __init__(self):
        """Initialize database manager from global settings."""
        settings = get_global_settings()
        self.database_url = settings.database_url
        self.echo = settings.debug
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Async engine with default connection pool settings."""
        if self._engine is None:
            self._engine = create_async_engine(
                self.database_url,
                echo=self.echo,  # Enable SQL logging in debug mode
                pool_pre_ping=True,
            )
        return self._engine

    @property
    def async_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Async session factory bound to the engine."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session with proper cleanup."""
        async with self.async_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def close(self) -> None:
        """Close database connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None


# Global database manager instance
db_manager = DatabaseManager()


# Dependency for FastAPI routes
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Fastapi dependency for getting a database session."""
    async with db_manager.get_session() as session:
        yield session
