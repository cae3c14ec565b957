"""
Services Layer

Business logic layer. ``skill_matcher`` holds the pure matching functions;
the service classes orchestrate them with the repositories.
"""

from .skill_matcher import (
    DEFAULT_THRESHOLD,
    JobPosting,
    MatchResult,
    RatedSkill,
    match,
    match_by_confidence,
    merge,
    parse_skills,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "JobPosting",
    "MatchResult",
    "RatedSkill",
    "match",
    "match_by_confidence",
    "merge",
    "parse_skills",
]
