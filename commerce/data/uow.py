"""Unit of Work pattern for atomic transactions."""

from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with UnitOfWork(session_factory) as uow:
            await uow.orders.create(order)
            await uow.commit()

    Nothing is committed implicitly: leaving the block without commit()
    discards the changes when the session closes.

    A repository write that fails with PersistenceError has already rolled
    the session back, so earlier uncommitted work in the same block is gone
    even if the caller catches the error and carries on.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._customer_repository: Optional[SqlAlchemyCustomerRepository] = None
        self._product_repository: Optional[SqlAlchemyProductRepository] = None
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        try:
            if exc_type is not None:
                logger.error(f"Transaction failed: {exc_val}")
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._customer_repository = None
            self._product_repository = None
            self._order_repository = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def customers(self) -> SqlAlchemyCustomerRepository:
        """Lazy-load customer repository."""
        if self._customer_repository is None:
            self._customer_repository = SqlAlchemyCustomerRepository(self.session)
        return self._customer_repository

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository."""
        if self._product_repository is None:
            self._product_repository = SqlAlchemyProductRepository(self.session)
        return self._product_repository

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        try:
            await self.session.commit()
            logger.info("✅ Transaction committed")
        except Exception as e:
            logger.error(f"❌ Commit failed: {e}")
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()
        logger.warning("Transaction rolled back")
