"""
API Dependencies

Common dependencies used across API endpoints: the database manager and
the service objects built on it.
"""

from fastapi import Depends

from app.core.config import get_settings
from app.core.container import get_container
from app.core.database import DatabaseManager, db_manager
from app.core.security import SecurityManager, get_security_manager
from app.repositories.job_repository import JobRepository
from app.repositories.skill_repository import UserSkillRepository
from app.repositories.user_repository import UserRepository
from app.services.job_service import JobService
from app.services.skill_service import SkillService
from app.services.user_service import UserService


def get_database() -> DatabaseManager:
    """
    Database manager dependency.

    Returns:
        DatabaseManager: The container's manager, or the global one
    """
    return get_container().get("db_manager") or db_manager


def get_user_service(
    database: DatabaseManager = Depends(get_database),
    security: SecurityManager = Depends(get_security_manager)
) -> UserService:
    return UserService(UserRepository(database), security)


def get_skill_service(database: DatabaseManager = Depends(get_database)) -> SkillService:
    return SkillService(
        UserSkillRepository(database),
        JobRepository(database),
        default_threshold=get_settings().MATCH_THRESHOLD
    )


def get_job_service(database: DatabaseManager = Depends(get_database)) -> JobService:
    return JobService(JobRepository(database))
