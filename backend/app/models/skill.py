"""
User Skill Database Model

One skill record per user, holding the merged skill list.
"""

from datetime import datetime
from typing import List

from sqlalchemy import Integer, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.core.database import Base


class UserSkill(Base):
    """
    Skill record for a single user.

    ``skills`` is stored as a JSON array and must be reassigned, not
    mutated in place, for changes to be persisted.
    """

    __tablename__ = "user_skills"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True
    )
    skills: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<UserSkill(user_id={self.user_id}, skills={len(self.skills or [])})>"
