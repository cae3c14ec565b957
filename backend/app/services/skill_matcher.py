"""
Skill Matcher

Pure skill-to-job matching and skill list merging. Nothing in this module
touches storage or the network; callers pass in already-loaded data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

DEFAULT_THRESHOLD = 60
SKILL_DELIMITER = ","


def normalize_skill(skill: str) -> str:
    """Comparison key for a skill label."""
    return skill.strip().casefold()


def skill_labels(skills: Any) -> List[str]:
    """
    Usable labels from a skill list.

    Anything that is not a non-blank string is ignored.
    """
    if isinstance(skills, str):
        skills = (skills,)
    return [skill for skill in skills or () if isinstance(skill, str) and skill.strip()]


@dataclass(frozen=True)
class JobPosting:
    """A catalog entry as seen by the matcher."""

    title: str
    course_id: Optional[str] = None
    required_skills: Sequence[str] = field(default_factory=tuple)
    company: Optional[str] = None
    description: Optional[str] = None
    job_type: Optional[str] = None
    confidence_needed: int = 0


@dataclass(frozen=True)
class MatchResult:
    """Outcome of comparing one job's required skills with a user's skills."""

    job_title: str
    course_id: Optional[str]
    required_skills: List[str]
    matched_skills: List[str]
    missing_skills: List[str]
    match_percent: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "jobTitle": self.job_title,
            "courseId": self.course_id,
            "requiredSkills": list(self.required_skills),
            "matchedSkills": list(self.matched_skills),
            "missingSkills": list(self.missing_skills),
            "matchPercent": self.match_percent,
        }


@dataclass(frozen=True)
class RatedSkill:
    """A skill with a self-reported confidence percentage."""

    name: str
    confidence: int


def match_percent(matched: int, required: int) -> int:
    """
    Percentage of required skills matched, rounded half up.

    Integer arithmetic keeps 62.5 -> 63 exact, unlike ``round()`` which
    rounds half to even.
    """
    return (200 * matched + required) // (2 * required)


def match(
    user_skills: Iterable[str],
    jobs: Mapping[str, JobPosting],
    threshold: int = DEFAULT_THRESHOLD,
) -> List[MatchResult]:
    """
    Match a user's skills against a job catalog.

    Args:
        user_skills: The user's skill labels
        jobs: Catalog keyed by job title, iterated in catalog order
        threshold: Minimum match percentage for inclusion (inclusive)

    Returns:
        List[MatchResult]: Qualifying jobs in catalog order
    """
    owned = {normalize_skill(skill) for skill in skill_labels(user_skills)}
    if not owned:
        return []

    results = []
    for title, job in jobs.items():
        required = skill_labels(job.required_skills)
        if not required:
            continue

        matched = [skill for skill in required if normalize_skill(skill) in owned]
        missing = [skill for skill in required if normalize_skill(skill) not in owned]
        percent = match_percent(len(matched), len(required))

        if percent >= threshold:
            results.append(
                MatchResult(
                    job_title=title,
                    course_id=job.course_id,
                    required_skills=required,
                    matched_skills=matched,
                    missing_skills=missing,
                    match_percent=percent,
                )
            )

    return results


def parse_skills(text: str) -> List[str]:
    """Split comma-separated skills, trimming whitespace and dropping empties."""
    tokens = (token.strip() for token in text.split(SKILL_DELIMITER))
    return [token for token in tokens if token]


def merge(existing: Iterable[str], incoming: str) -> List[str]:
    """
    Merge uploaded skill text into an existing skill list.

    Deduplicates case-insensitively, keeps the first-seen casing and
    appends new skills after existing ones in the order they appear.
    """
    merged: List[str] = []
    seen = set()
    for skill in list(existing) + parse_skills(incoming):
        key = normalize_skill(skill)
        if key in seen:
            continue
        seen.add(key)
        merged.append(skill)
    return merged


def match_by_confidence(
    rated_skills: Iterable[RatedSkill],
    jobs: Mapping[str, JobPosting],
    job_type: Optional[str] = None,
) -> List[JobPosting]:
    """
    Demo matcher: a job qualifies when any of its required skills is held
    with confidence at or above the job's ``confidence_needed``.

    This is a different algorithm from :func:`match` and is only used by
    the public demo endpoint.
    """
    confidence_by_skill: Dict[str, int] = {}
    for rated in rated_skills:
        confidence_by_skill[normalize_skill(rated.name)] = rated.confidence
    if not confidence_by_skill:
        return []

    matches = []
    for job in jobs.values():
        if job_type and (job.job_type or "").casefold() != job_type.casefold():
            continue
        if any(
            confidence_by_skill.get(normalize_skill(skill), -1) >= job.confidence_needed
            for skill in skill_labels(job.required_skills)
        ):
            matches.append(job)
    return matches
