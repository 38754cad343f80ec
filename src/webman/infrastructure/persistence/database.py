"""Database abstraction layer using SQLAlchemy 2.0 async.

This module provides the database session management and engine configuration
for SQLAlchemy with async support. SQLite (aiosqlite) is the default store;
any async SQLAlchemy URL can be configured instead.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from webman.core.config import get_settings
from webman.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Database connection and session manager.

    This class manages the async database engine and session factory.
    Both are created lazily on first use.
    """

    def __init__(self) -> None:
        """Initialize the database manager."""
        self.settings = get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.settings.database_url.startswith("sqlite")

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine.

        Returns:
            AsyncEngine: SQLAlchemy async engine instance.
        """
        if self._engine is None:
            self._engine = create_async_engine(
                self.settings.database_url,
                echo=self.settings.db_echo,
                connect_args={"check_same_thread": False} if self.is_sqlite else {},
            )
            if self.is_sqlite:
                event.listen(
                    self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys
                )

            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory.

        Returns:
            async_sessionmaker: SQLAlchemy async session factory.
        """
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.debug("Database session factory created")
        return self._session_factory

    async def create_tables(self) -> None:
        """Create all database tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created")

    async def drop_tables(self) -> None:
        """Drop all database tables.

        WARNING: This will delete all data. Only use in testing!
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            logger.warning("Database tables dropped")

    async def disconnect(self) -> None:
        """Close the database engine and all connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session scope for database operations.

        Yields:
            AsyncSession: SQLAlchemy async session.

        Example:
            async with db.session() as session:
                result = await session.execute(select(CollectionModel))
                collections = result.scalars().all()
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                logger.debug("Database connection check successful")
                return True
        except Exception as e:
            logger.error("Database connection check failed", error=str(e))
            return False


# Global database manager instance
_db_manager: DatabaseManager | None = None


def get_db_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI to get database session.

    Yields:
        AsyncSession: SQLAlchemy async session.
    """
    db = get_db_manager()
    async with db.session() as session:
        yield session


def _sqlite_database_path(database_url: str) -> Path | None:
    """Extract the file path from a SQLite URL, None for in-memory databases."""
    if ":///" not in database_url:
        return None
    db_path = database_url.split(":///", 1)[-1]
    if not db_path or db_path == ":memory:":
        return None
    return Path(db_path)


async def init_database() -> None:
    """Initialize the database.

    Creates the SQLite directory if needed, verifies connectivity,
    creates tables when auto-create is enabled and seeds the default
    header catalog.
    """
    # Import all models to ensure they are registered with Base.metadata
    from webman.infrastructure.persistence import models  # noqa: F401

    db = get_db_manager()
    settings = get_settings()

    if db.is_sqlite:
        db_file = _sqlite_database_path(settings.database_url)
        if db_file is not None:
            db_file.parent.mkdir(parents=True, exist_ok=True)
            logger.info("Database directory created", path=str(db_file.parent))

    if not await db.check_connection():
        logger.error("Database connection failed")
        raise RuntimeError("Failed to connect to database")

    if settings.db_auto_create:
        await db.create_tables()
    else:
        logger.info("Auto-create disabled: skipping table creation, use migrations")

    await _seed_default_headers(db)


async def _seed_default_headers(db: DatabaseManager) -> None:
    """Persist the default header catalog if the table is empty.

    Args:
        db: Database manager instance.
    """
    from webman.domain.services import HeaderService
    from webman.infrastructure.persistence.repositories import DefaultHeaderRepository

    try:
        async with db.session() as session:
            repo = DefaultHeaderRepository(session)
            if await repo.count() > 0:
                logger.debug("Default headers already seeded")
                return

            headers = HeaderService().get_default_headers()
            await repo.create_many(headers)
            await session.commit()
            logger.info("Seeded default headers", count=len(headers))
    except SQLAlchemyError as e:
        # The catalog is reference data; startup continues without it
        logger.error("Failed to seed default headers", error=str(e))


async def close_database() -> None:
    """Close the database connection."""
    db = get_db_manager()
    await db.disconnect()
