"""
Repository Layer

Data access layer using the repository pattern for clean separation
of database operations from business logic.
"""

from .base_repository import BaseRepository
from .user_repository import UserRepository
from .skill_repository import UserSkillRepository
from .job_repository import JobRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "UserSkillRepository",
    "JobRepository"
]
