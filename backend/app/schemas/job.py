"""
Job Pydantic Schemas

Request/response models for job catalog endpoints.
"""

from typing import Any, Optional, List

from pydantic import Field, field_validator, model_validator

from app.schemas.base import CamelModel


class JobBase(CamelModel):
    """Base job schema with common fields."""

    title: str = Field(..., min_length=1, max_length=255, description="Job title, unique in the catalog")
    course_id: Optional[str] = Field(None, max_length=100, description="Course reference")
    required_skills: List[str] = Field(default_factory=list, description="Required skills")

    company: Optional[str] = Field(None, max_length=255, description="Company name")
    description: Optional[str] = Field(None, description="Job description")
    job_type: Optional[str] = Field(None, max_length=50, description="Remote, On-site or Hybrid")
    confidence_needed: int = Field(0, ge=0, le=100, description="Confidence required per skill")


class JobCreate(JobBase):
    """Schema for creating a new job."""

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("required_skills")
    @classmethod
    def strip_skills(cls, value: List[str]) -> List[str]:
        return [skill.strip() for skill in value if skill and skill.strip()]


class CatalogEntry(JobCreate):
    """A job as written in a catalog file, where the title is the entry key."""

    @model_validator(mode="before")
    @classmethod
    def read_catalog_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "type" in data and "jobType" not in data:
            data["jobType"] = data.pop("type")
        # null means "not given" in hand-written catalogs
        for key in ("requiredSkills", "confidenceNeeded"):
            if key in data and data[key] is None:
                del data[key]
        return data

    @field_validator("course_id", mode="before")
    @classmethod
    def course_id_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class JobResponse(JobBase):
    """Schema for job response."""
