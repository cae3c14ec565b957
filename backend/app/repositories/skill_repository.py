"""
User Skill Repository Implementation

Repository for per-user skill records.
"""

from typing import Callable, List, Optional, Tuple, Type
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.base_repository import BaseRepository
from app.models.skill import UserSkill
from app.utils.logger import get_logger, log_store_operation

logger = get_logger(__name__)


class UserSkillRepository(BaseRepository[UserSkill]):
    """Repository for user skill records."""

    @property
    def model(self) -> Type[UserSkill]:
        return UserSkill

    async def get_skills(self, user_id: int) -> List[str]:
        """Get a user's skills; a user without a record has none."""
        record = await self.get_by_id(user_id)
        return list(record.skills) if record else []

    async def update_skills(
        self,
        user_id: int,
        updater: Callable[[List[str]], List[str]]
    ) -> List[str]:
        """
        Read, transform and write a user's skills in one transaction.

        Creates the record on first use. If another request creates it
        first, the update is retried once against the stored record.

        Args:
            user_id: Owner of the record
            updater: Receives the stored skills, returns the new list

        Returns:
            List[str]: The persisted skill list
        """
        try:
            try:
                operation, updated = await self._apply_update(user_id, updater)
            except IntegrityError:
                logger.info("Skill record created concurrently, retrying", user_id=user_id)
                operation, updated = await self._apply_update(user_id, updater)
        except SQLAlchemyError as e:
            raise self._storage_error("updating", e)

        log_store_operation(
            operation,
            self.model.__tablename__,
            record_id=user_id,
            skill_count=len(updated)
        )
        return updated

    async def _load_for_update(self, session: AsyncSession, user_id: int) -> Optional[UserSkill]:
        return await session.get(self.model, user_id, with_for_update=True)

    async def _apply_update(
        self,
        user_id: int,
        updater: Callable[[List[str]], List[str]]
    ) -> Tuple[str, List[str]]:
        async with self.session() as session:
            record = await self._load_for_update(session, user_id)
            existing = list(record.skills) if record else []
            updated = list(updater(existing))

            if record is None:
                session.add(self.model(user_id=user_id, skills=updated))
                operation = "create"
            else:
                # Reassign so the JSON column is flagged dirty
                record.skills = updated
                operation = "update"

            await session.flush()
        return operation, updated
