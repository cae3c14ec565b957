"""
Job Service Layer

Job catalog management: listing, creation and bulk import.
"""

from typing import Any, Dict, List, Mapping

from pydantic import ValidationError as PydanticValidationError

from app.core.config import load_job_catalog
from app.core.exceptions import (
    ConfigurationException,
    DuplicateResourceException,
    JobNotFoundException,
    ValidationException,
)
from app.repositories.job_repository import JobRepository, to_posting
from app.schemas.job import CatalogEntry, JobCreate
from app.services.skill_matcher import JobPosting
from app.utils.logger import LoggerMixin


def entry_posting(entry: JobCreate) -> JobPosting:
    """Matcher posting for a validated job."""
    return JobPosting(
        title=entry.title,
        course_id=entry.course_id,
        required_skills=tuple(entry.required_skills),
        company=entry.company,
        description=entry.description,
        job_type=entry.job_type,
        confidence_needed=entry.confidence_needed,
    )


class JobService(LoggerMixin):
    """Service layer for job catalog operations."""

    def __init__(self, job_repo: JobRepository):
        self.job_repo = job_repo

    async def list_jobs(self) -> List[JobPosting]:
        """All jobs in catalog order."""
        catalog = await self.job_repo.get_catalog()
        return list(catalog.values())

    async def get_job(self, title: str) -> JobPosting:
        """
        Get a job by title.

        Raises:
            JobNotFoundException: If the title is not in the catalog
        """
        job = await self.job_repo.get_by_title(title)
        if job is None:
            raise JobNotFoundException(title)
        return to_posting(job)

    async def create_job(self, job_data: JobCreate) -> JobPosting:
        """
        Append a job to the catalog.

        Raises:
            DuplicateResourceException: If the title already exists
        """
        if await self.job_repo.get_by_title(job_data.title):
            raise DuplicateResourceException("Job", job_data.title)

        job = await self.job_repo.create(job_data)
        self.logger.info("Job created", title=job.title, skills=len(job.required_skills))
        return to_posting(job)

    async def import_catalog(self, catalog: Mapping[str, Any]) -> Dict[str, int]:
        """
        Upsert a catalog in the ``{title: {courseId, requiredSkills}}`` shape.

        Every entry is validated before anything is written.

        Raises:
            ValidationException: If an entry is not an object or has invalid fields
        """
        postings = {}
        for title, data in catalog.items():
            if not isinstance(data, Mapping):
                raise ValidationException(
                    f"Catalog entry for {title!r} must be an object",
                    field_errors={title: "Expected an object"}
                )
            try:
                entry = CatalogEntry.model_validate({**data, "title": title})
            except PydanticValidationError as e:
                field_errors = {
                    ".".join(str(part) for part in error["loc"]): error["msg"]
                    for error in e.errors()
                }
                raise ValidationException(
                    f"Catalog entry for {title!r} is invalid: "
                    + "; ".join(f"{name}: {msg}" for name, msg in field_errors.items()),
                    field_errors=field_errors
                )
            postings[entry.title] = entry_posting(entry)

        counts = await self.job_repo.upsert_many(postings)
        self.logger.info("Job catalog imported", **counts)
        return counts

    async def import_catalog_file(self, path: str) -> Dict[str, int]:
        """
        Load and upsert a catalog file.

        Raises:
            ConfigurationException: If the file cannot be loaded
        """
        try:
            catalog = load_job_catalog(path)
        except ValueError as e:
            raise ConfigurationException("JOBS_SEED_FILE", str(e))
        return await self.import_catalog(catalog)
