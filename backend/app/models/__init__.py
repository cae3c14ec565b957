"""
Database Models Package

Contains SQLAlchemy ORM models for the SkillMatch application.
"""

from app.core.database import Base
from app.models.user import User
from app.models.skill import UserSkill
from app.models.job import Job

__all__ = [
    "Base",
    "User",
    "UserSkill",
    "Job",
]
