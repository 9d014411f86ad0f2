"""Shared plumbing for SQLAlchemy repositories."""

from typing import Generic, Optional, Type, TypeVar
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.domain.exceptions import NotFoundError, PersistenceError


logger = logging.getLogger(__name__)

M = TypeVar("M")


class SqlAlchemyRepository(Generic[M]):
    """
    Base class for repositories working on one ORM model.

    Repositories only flush; committing belongs to the UnitOfWork that owns
    the session.
    """

    entity_name: str = "Entity"

    def __init__(self, session: AsyncSession, model: Type[M]) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
            model: ORM model class handled by this repository
        """
        self._session = session
        self._model = model

    async def _get(self, entity_id: str) -> Optional[M]:
        return await self._session.get(self._model, entity_id)

    async def _get_or_raise(self, entity_id: str) -> M:
        model = await self._get(entity_id)
        if model is None:
            logger.info(f"{self.entity_name} not found: {entity_id}")
            raise NotFoundError(self.entity_name, entity_id)
        return model

    async def _ensure_absent(self, entity_id: str) -> None:
        if await self._get(entity_id) is not None:
            logger.error(f"{self.entity_name} already exists: {entity_id}")
            raise PersistenceError(
                "create", f"{self.entity_name} already exists: {entity_id}"
            )

    async def _flush(self, operation: str, entity_id: str) -> None:
        """
        Flush pending changes, translating constraint violations.

        On failure the session is rolled back so it stays usable.

        Raises:
            PersistenceError: On IntegrityError (foreign key, unique, not null)
        """
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.error(f"Failed to {operation} {self.entity_name} {entity_id}: {e.orig}")
            await self._session.rollback()
            raise PersistenceError(
                operation,
                f"Failed to {operation} {self.entity_name} {entity_id}: {e.orig}",
            ) from e
