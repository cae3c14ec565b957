"""
Skill Service Layer

Skill uploads and job matching for authenticated users.
"""

from typing import Any, Dict, List, Optional, Sequence

from app.core.exceptions import InvalidSkillsInputException
from app.repositories.job_repository import JobRepository
from app.repositories.skill_repository import UserSkillRepository
from app.services import skill_matcher
from app.services.skill_matcher import JobPosting, MatchResult, RatedSkill
from app.utils.logger import LoggerMixin, log_match_computation


class SkillService(LoggerMixin):
    """Service layer for skill records and matching."""

    def __init__(
        self,
        skill_repo: UserSkillRepository,
        job_repo: JobRepository,
        default_threshold: int = skill_matcher.DEFAULT_THRESHOLD
    ):
        self.skill_repo = skill_repo
        self.job_repo = job_repo
        self.default_threshold = default_threshold

    async def upload_skills(self, user_id: int, raw_skills: Any) -> Dict[str, List[str]]:
        """
        Merge uploaded comma-separated skills into the user's record.

        Args:
            user_id: Authenticated user
            raw_skills: Upload body value, must be a non-empty string

        Returns:
            Dict[str, List[str]]: ``parsed`` skills from this upload and
            the ``merged`` list now stored

        Raises:
            InvalidSkillsInputException: If raw_skills is not a non-empty string
        """
        if not isinstance(raw_skills, str) or not raw_skills:
            raise InvalidSkillsInputException()

        parsed = skill_matcher.parse_skills(raw_skills)
        merged = await self.skill_repo.update_skills(
            user_id,
            lambda existing: skill_matcher.merge(existing, raw_skills)
        )

        self.logger.info(
            "Skills uploaded",
            user_id=user_id,
            parsed=len(parsed),
            total=len(merged)
        )
        return {"parsed": parsed, "merged": merged}

    async def get_skills(self, user_id: int) -> List[str]:
        """Skills stored for a user."""
        return await self.skill_repo.get_skills(user_id)

    async def get_all_skills(self) -> List[Dict[str, Any]]:
        """Every user's skill record."""
        records = await self.skill_repo.get_multi()
        return [{"user_id": record.user_id, "skills": list(record.skills)} for record in records]

    async def find_matches(
        self,
        user_id: int,
        threshold: Optional[int] = None
    ) -> List[MatchResult]:
        """
        Jobs whose required skills the user meets at or above threshold.

        Args:
            user_id: Authenticated user
            threshold: Minimum match percentage, defaults to the configured one

        Returns:
            List[MatchResult]: Qualifying jobs in catalog order
        """
        if threshold is None:
            threshold = self.default_threshold

        user_skills = await self.skill_repo.get_skills(user_id)
        if not user_skills:
            log_match_computation(str(user_id), 0, 0, threshold, reason="no_skills")
            return []

        catalog = await self.job_repo.get_catalog()
        results = skill_matcher.match(user_skills, catalog, threshold)

        log_match_computation(
            str(user_id),
            jobs_considered=len(catalog),
            matches=len(results),
            threshold=threshold,
            user_skill_count=len(user_skills)
        )
        return results

    async def demo_match(
        self,
        rated_skills: Sequence[RatedSkill],
        job_type: Optional[str] = None
    ) -> List[JobPosting]:
        """Confidence-based demo matching over the stored catalog."""
        catalog = await self.job_repo.get_catalog()
        return skill_matcher.match_by_confidence(rated_skills, catalog, job_type)
