"""
User Repository Implementation

Repository for account records.
"""

from typing import Optional, Type
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.repositories.base_repository import BaseRepository
from app.models.user import User
from app.utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for user database operations."""

    @property
    def model(self) -> Type[User]:
        return User

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username."""
        async with self.session() as session:
            try:
                query = select(self.model).where(self.model.username == username)
                result = await session.execute(query)
                return result.scalar_one_or_none()
            except SQLAlchemyError as e:
                raise self._storage_error("getting by username", e)
