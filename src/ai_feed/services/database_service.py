# ai_feed/services/database_service.py
"""
Database service for async SQLAlchemy session management.

Provides a singleton service for managing the content repository connection,
sessions, and health checks. Supports SQLite (development, via aiosqlite)
and any other SQLAlchemy async URL (production).

Usage:
    from ai_feed.services.database_service import database_service

    async with database_service.get_session() as session:
        result = await session.execute(select(Node))

    await database_service.init_db()
    health = await database_service.health_check()
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ..config import settings
from ..database.base import Base


class DatabaseService:
    """
    Database service for managing async SQLAlchemy sessions.

    Attributes:
        database_url: SQLAlchemy async URL in use
        _engine: Async SQLAlchemy engine
        _session_factory: Async session factory
        _logger: Logger instance
    """

    def __init__(self, database_url: Optional[str] = None):
        self._logger = logging.getLogger("ai_feed.database")
        self.database_url = database_url or settings.database_url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialize_engine()

    @property
    def database_type(self) -> str:
        return self.database_url.split(":", 1)[0].split("+", 1)[0]

    def _initialize_engine(self) -> None:
        """
        Create the async engine for ``database_url``.

        SQLite:
            - check_same_thread=False for async support
            - Creates the data directory for file databases
            - In-memory databases share one connection (StaticPool)

        Other databases:
            - Pool pre-ping and hourly recycle
        """
        self._logger.info(f"Initializing database: {self.database_url.split('@')[-1].split('?')[0]}")

        if self.database_url.startswith("sqlite"):
            db_path = self.database_url.split("///", 1)[1].split("?")[0] if ":///" in self.database_url else ""
            engine_kwargs: Dict[str, Any] = {
                "connect_args": {"check_same_thread": False},
                "echo": settings.debug,
            }
            if not db_path or db_path == ":memory:":
                engine_kwargs["poolclass"] = StaticPool
            else:
                db_dir = os.path.dirname(db_path)
                if db_dir and not os.path.exists(db_dir):
                    os.makedirs(db_dir, exist_ok=True)
                    self._logger.info(f"Created database directory: {db_dir}")
                engine_kwargs["pool_pre_ping"] = True
            self._engine = create_async_engine(self.database_url, **engine_kwargs)
        else:
            self._engine = create_async_engine(
                self.database_url,
                pool_pre_ping=True,
                pool_recycle=3600,
                echo=settings.debug,
            )

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get async database session as context manager.

        Commits on success and rolls back on error; errors are re-raised.
        """
        if not self._session_factory:
            raise RuntimeError("Database not initialized")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def init_db(self) -> None:
        """Create all tables that do not exist yet. Safe to call repeatedly."""
        if not self._engine:
            raise RuntimeError("Database engine not initialized")

        self._logger.info("Creating database tables...")

        async with self._engine.begin() as conn:
            from ..database import models  # noqa: F401

            await conn.run_sync(Base.metadata.create_all)

        self._logger.info("Database tables created successfully")

    async def health_check(self) -> Dict[str, Any]:
        """
        Check database connectivity with ``SELECT 1``.

        Returns:
            {"status": "healthy"|"unhealthy", "connected": bool,
             "database_type": str, "error": str (if unhealthy)}
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
            return {
                "status": "healthy",
                "connected": True,
                "database_type": self.database_type,
            }
        except Exception as e:
            self._logger.error(f"Database health check failed: {e}")
            return {
                "status": "unhealthy",
                "connected": False,
                "database_type": self.database_type,
                "error": str(e),
            }

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine:
            await self._engine.dispose()
            self._logger.info("Database connections closed")


# Global database service instance
database_service = DatabaseService()
