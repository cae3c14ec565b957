"""
Base Repository Pattern Implementation

Provides abstract base repository with common database operations
and transaction management using SQLAlchemy async sessions.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, List, Optional, Dict, Any, Type
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import DatabaseManager
from app.core.exceptions import StorageException
from app.utils.logger import get_logger

ModelType = TypeVar("ModelType")

logger = get_logger(__name__)


class BaseRepository(Generic[ModelType], ABC):
    """Abstract base repository providing common CRUD operations."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    @property
    @abstractmethod
    def model(self) -> Type[ModelType]:
        """Return the SQLAlchemy model class."""
        pass

    def session(self):
        """Transactional session scope."""
        return self.db_manager.session()

    def _storage_error(self, action: str, error: SQLAlchemyError) -> StorageException:
        logger.error(f"Error {action} {self.model.__name__}: {error}")
        return StorageException(f"Error {action} {self.model.__name__}: {error}")

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """Get entity by primary key."""
        async with self.session() as session:
            try:
                return await session.get(self.model, id)
            except SQLAlchemyError as e:
                raise self._storage_error("getting", e)

    async def get_multi(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[ModelType]:
        """Get multiple entities with pagination and filtering."""
        async with self.session() as session:
            try:
                query = select(self.model)

                # Apply filters
                if filters:
                    for field, value in filters.items():
                        if hasattr(self.model, field):
                            column = getattr(self.model, field)
                            if isinstance(value, list):
                                query = query.where(column.in_(value))
                            else:
                                query = query.where(column == value)

                query = query.order_by(*self.model.__table__.primary_key.columns)
                query = query.offset(skip)
                if limit is not None:
                    query = query.limit(limit)

                result = await session.execute(query)
                return list(result.scalars().all())

            except SQLAlchemyError as e:
                raise self._storage_error("listing", e)

    async def create(self, obj_in: Any) -> ModelType:
        """Create new entity from a dict or pydantic model."""
        async with self.session() as session:
            try:
                # Convert Pydantic model to dict if needed
                if hasattr(obj_in, 'model_dump'):
                    create_data = obj_in.model_dump()
                else:
                    create_data = dict(obj_in)

                db_obj = self.model(**create_data)
                session.add(db_obj)
                await session.flush()
                await session.refresh(db_obj)
                return db_obj

            except SQLAlchemyError as e:
                raise self._storage_error("creating", e)

