"""
Database handle.

Owns the async engine and session factory. Created explicitly and passed
to whoever needs a unit of work; there is no module-level engine.
"""
from typing import Optional
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from commerce.settings import DatabaseSettings, get_settings

from .models import Base
from .uow import UnitOfWork


logger = logging.getLogger(__name__)


def _set_sqlite_pragma(dbapi_conn, connection_record):
    """SQLite ignores foreign keys unless asked on every connection."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    In-memory SQLite shares one connection (StaticPool) so every session
    sees the same database.

    Returns:
        Configured async engine
    """
    logger.info(f"Creating database engine: {settings.database_url}")

    if settings.is_sqlite:
        kwargs = {"connect_args": {"check_same_thread": False}}
        if settings.is_memory:
            kwargs["poolclass"] = StaticPool
        engine = create_async_engine(settings.database_url, echo=settings.echo_sql, **kwargs)
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)
        return engine

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        pool_recycle=settings.pool_recycle,
        pool_pre_ping=True,  # Test connections before using
    )


class Database:
    """
    Store context: engine plus session factory.

    Usage:
        database = Database(DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:"))
        await database.create_all()
        async with database.unit_of_work() as uow:
            await uow.orders.create(order)
            await uow.commit()
        await database.dispose()
    """

    def __init__(self, settings: Optional[DatabaseSettings] = None) -> None:
        self.settings = settings or get_settings().database
        self.engine = create_engine(self.settings)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    def unit_of_work(self) -> UnitOfWork:
        """Create a new Unit of Work bound to this database."""
        return UnitOfWork(self.session_factory)

    async def create_all(self) -> None:
        """Create all tables if they don't exist."""
        logger.info("Initializing database...")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database initialized successfully")

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """Close database connections."""
        logger.info("Closing database connections...")
        await self.engine.dispose()
