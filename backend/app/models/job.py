"""
Job Database Model

SQLAlchemy 2.0 model for job catalog entries.
"""

from typing import Optional, List
from datetime import datetime

from sqlalchemy import (
    Integer, String, Text, DateTime, JSON,
    CheckConstraint, UniqueConstraint
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.core.database import Base


class Job(Base):
    """
    Job catalog entry.

    Catalog order is insertion order, i.e. ascending ``id``.
    """

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    course_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    required_skills: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    # Descriptive fields shown by the front end
    company: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    job_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    confidence_needed: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    __table_args__ = (
        UniqueConstraint("title", name="uq_job_title"),
        CheckConstraint(
            "confidence_needed >= 0 AND confidence_needed <= 100",
            name="ck_job_confidence_needed_range"
        ),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}')>"

