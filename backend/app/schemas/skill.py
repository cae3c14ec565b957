"""
Skill Pydantic Schemas

Request/response models for skill upload and matching endpoints.
"""

from typing import Any, List, Optional

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.job import JobResponse


class SkillUploadRequest(CamelModel):
    """
    Skill upload body.

    ``skills`` is a comma-separated string. It is left untyped here so a
    wrong type is reported as a 400 by the service, like a missing value.
    """

    skills: Optional[Any] = Field(None, description="Comma-separated skills", examples=["Python, SQL"])


class SkillUploadResponse(CamelModel):
    message: str
    skills: List[str] = Field(..., description="Skills parsed from this upload")
    merged_skills: List[str] = Field(..., description="All skills after merging")


class MySkillsResponse(CamelModel):
    skills: List[str]


class UserSkillRecordResponse(CamelModel):
    user_id: int
    skills: List[str]


class AllUserSkillsResponse(CamelModel):
    user_skills: List[UserSkillRecordResponse]


class MatchResultResponse(CamelModel):
    """One qualifying job."""

    job_title: str
    course_id: Optional[str] = None
    required_skills: List[str]
    matched_skills: List[str]
    missing_skills: List[str]
    match_percent: int = Field(..., ge=0, le=100)


class MatchingCoursesResponse(CamelModel):
    matching_courses: List[MatchResultResponse]


class RatedSkillIn(CamelModel):
    name: str = Field(..., min_length=1, description="Skill name")
    confidence: int = Field(..., ge=0, le=100, description="Self-reported confidence")


class DemoMatchRequest(CamelModel):
    skills: List[RatedSkillIn] = Field(default_factory=list)
    job_type: Optional[str] = Field(None, description="Only jobs of this type")


class DemoMatchResponse(CamelModel):
    jobs: List[JobResponse]
