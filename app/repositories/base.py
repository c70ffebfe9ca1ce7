"""Base repository for database operations."""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    RecordNotFoundError,
)


ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Base repository implementing the lookups shared by every entity.

    Repositories only flush; committing is left to the caller so that several
    repository calls can form one unit of work.

    Attributes:
        model: The SQLModel database model type.
        label: Human-readable entity name used in error messages.
    """

    model: type[ModelT]
    label: str = "Record"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        return await self.session.get(self.model, record_id)

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Raises:
            RecordNotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(detail=f"{self.label} {record_id} not found")
        return record

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record, flush it and refresh it from the database.

        Raises:
            IntegrityError: Re-raised for the caller to classify
            DatabaseConnectionError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError:
            await self.session.rollback()
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save {self.label.lower()}: {e}") from e
        return record

    @staticmethod
    def _integrity_message(error: IntegrityError) -> str:
        return str(error.orig) if error.orig else str(error)

    def _integrity_error(self, error: IntegrityError) -> DatabaseError:
        return DatabaseError(
            detail=f"Database integrity error: {self._integrity_message(error)}",
        )
