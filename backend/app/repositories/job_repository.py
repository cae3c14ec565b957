"""
Job Repository Implementation

Repository for the job catalog. Catalog order is insertion order.
"""

from typing import Any, Dict, Mapping, Optional, Type
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.repositories.base_repository import BaseRepository
from app.models.job import Job
from app.services.skill_matcher import JobPosting
from app.utils.logger import get_logger, log_store_operation

logger = get_logger(__name__)


def to_posting(job: Job) -> JobPosting:
    """Convert a stored job to the matcher's posting type."""
    return JobPosting(
        title=job.title,
        course_id=job.course_id,
        required_skills=tuple(job.required_skills or ()),
        company=job.company,
        description=job.description,
        job_type=job.job_type,
        confidence_needed=job.confidence_needed or 0,
    )


def posting_columns(posting: JobPosting) -> Dict[str, Any]:
    """Column values for a posting."""
    return {
        "title": posting.title,
        "course_id": posting.course_id,
        "required_skills": list(posting.required_skills or ()),
        "company": posting.company,
        "description": posting.description,
        "job_type": posting.job_type,
        "confidence_needed": posting.confidence_needed,
    }


class JobRepository(BaseRepository[Job]):
    """Repository for job catalog operations."""

    @property
    def model(self) -> Type[Job]:
        return Job

    async def get_by_title(self, title: str) -> Optional[Job]:
        """Get job by its catalog title."""
        async with self.session() as session:
            try:
                query = select(self.model).where(self.model.title == title)
                result = await session.execute(query)
                return result.scalar_one_or_none()
            except SQLAlchemyError as e:
                raise self._storage_error("getting by title", e)

    async def get_catalog(self) -> Dict[str, JobPosting]:
        """All jobs keyed by title, in catalog order."""
        jobs = await self.get_multi()
        return {job.title: to_posting(job) for job in jobs}

    async def upsert_many(self, postings: Mapping[str, JobPosting]) -> Dict[str, int]:
        """
        Insert or update postings by title in one transaction.

        New titles are appended to the catalog; existing titles keep
        their position.

        Returns:
            Dict[str, int]: Counts of created and updated jobs
        """
        created = updated = 0
        async with self.session() as session:
            try:
                result = await session.execute(
                    select(self.model).where(self.model.title.in_(list(postings)))
                )
                existing = {job.title: job for job in result.scalars().all()}

                for title, posting in postings.items():
                    values = posting_columns(posting)
                    job = existing.get(title)
                    if job is None:
                        session.add(self.model(**values))
                        created += 1
                    else:
                        for field, value in values.items():
                            setattr(job, field, value)
                        updated += 1

                    # Keep insertion ids in file order
                    await session.flush()

            except SQLAlchemyError as e:
                raise self._storage_error("upserting", e)

        log_store_operation(
            "upsert",
            self.model.__tablename__,
            created=created,
            updated=updated
        )
        return {"created": created, "updated": updated}

