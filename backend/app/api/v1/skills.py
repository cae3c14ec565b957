"""
Skills API v1 Endpoints

Skill uploads and skill-based job matching.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.exceptions import BaseApplicationException
from app.core.security import get_current_user
from app.schemas.job import JobResponse
from app.schemas.skill import (
    AllUserSkillsResponse,
    DemoMatchRequest,
    DemoMatchResponse,
    MatchingCoursesResponse,
    MatchResultResponse,
    MySkillsResponse,
    SkillUploadRequest,
    SkillUploadResponse,
    UserSkillRecordResponse,
)
from app.schemas.user import CurrentUser
from app.api.deps import get_skill_service
from app.services.skill_matcher import RatedSkill
from app.services.skill_service import SkillService
from app.utils.logger import get_logger, log_api_request

logger = get_logger(__name__)
router = APIRouter(prefix="/skills", tags=["skills"])


@router.post("/upload", response_model=SkillUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_skills(
    body: SkillUploadRequest,
    current_user: CurrentUser = Depends(get_current_user),
    skill_service: SkillService = Depends(get_skill_service)
):
    """Merge comma-separated skills into the caller's skill list."""
    log_api_request("POST", "/skills/upload", user_id=str(current_user.id))
    result = await skill_service.upload_skills(current_user.id, body.skills)
    return SkillUploadResponse(
        message="Skills uploaded",
        skills=result["parsed"],
        merged_skills=result["merged"]
    )


@router.get("/my", response_model=MySkillsResponse)
async def get_my_skills(
    current_user: CurrentUser = Depends(get_current_user),
    skill_service: SkillService = Depends(get_skill_service)
):
    """The caller's skills."""
    skills = await skill_service.get_skills(current_user.id)
    return MySkillsResponse(skills=skills)


@router.get("/all", response_model=AllUserSkillsResponse)
async def get_all_user_skills(
    current_user: CurrentUser = Depends(get_current_user),
    skill_service: SkillService = Depends(get_skill_service)
):
    """Every user's skill record."""
    records = await skill_service.get_all_skills()
    return AllUserSkillsResponse(
        user_skills=[UserSkillRecordResponse(**record) for record in records]
    )


@router.get("/find-courses-by-match", response_model=MatchingCoursesResponse)
async def find_courses_by_match(
    threshold: Optional[int] = Query(None, ge=0, le=100, description="Minimum match percentage"),
    current_user: CurrentUser = Depends(get_current_user),
    skill_service: SkillService = Depends(get_skill_service)
):
    """Jobs whose required skills the caller meets at or above the threshold."""
    log_api_request("GET", "/skills/find-courses-by-match", user_id=str(current_user.id))
    try:
        results = await skill_service.find_matches(current_user.id, threshold)
    except BaseApplicationException:
        raise
    except Exception as e:
        logger.error(f"Error matching jobs for user {current_user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to match jobs"
        )

    return MatchingCoursesResponse(
        matching_courses=[MatchResultResponse.model_validate(result) for result in results]
    )


@router.post("/demo-match", response_model=DemoMatchResponse)
async def demo_match(
    body: DemoMatchRequest,
    skill_service: SkillService = Depends(get_skill_service)
):
    """
    Confidence-based demo matching, no account needed.

    A job matches when any required skill is rated at or above the job's
    confidence requirement.
    """
    rated = [RatedSkill(name=skill.name, confidence=skill.confidence) for skill in body.skills]
    jobs = await skill_service.demo_match(rated, body.job_type)
    return DemoMatchResponse(jobs=[JobResponse.model_validate(job) for job in jobs])
