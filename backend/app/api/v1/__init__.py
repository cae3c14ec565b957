"""
API v1 Package

Contains all version 1 API endpoints for the SkillMatch application.
"""

from .users import router as users_router
from .skills import router as skills_router
from .jobs import router as jobs_router
from .health import router as health_router

__all__ = [
    "users_router",
    "skills_router",
    "jobs_router",
    "health_router"
]
