"""
Application Configuration

Centralized configuration management using Pydantic settings.
Handles environment variables, secrets, and application settings.
"""

from typing import List, Optional, Any, Dict
from functools import lru_cache
import json
from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    APP_NAME: str = "SkillMatch"
    VERSION: str = "1.0.0"
    DEBUG: bool = Field(False)
    ENVIRONMENT: str = Field("development")
    HOST: str = Field("0.0.0.0")
    PORT: int = Field(3000)
    LOG_LEVEL: str = Field("INFO")
    LOG_TO_FILE: bool = Field(False)
    LOG_DIR: str = Field("logs")

    # Security
    SECRET_KEY: str = Field(..., min_length=8)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60)
    ALGORITHM: str = "HS256"

    # Database
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./skillmatch.db")
    DATABASE_POOL_SIZE: int = Field(5)
    DATABASE_MAX_OVERFLOW: int = Field(10)

    # Job catalog
    JOBS_SEED_FILE: Optional[str] = Field(None)

    # Skill matching
    MATCH_THRESHOLD: int = Field(60, ge=0, le=100)

    # CORS
    CORS_ORIGINS: str = Field("http://localhost:5173")
    CORS_CREDENTIALS: bool = Field(True)
    CORS_METHODS: str = Field("*")
    CORS_HEADERS: str = Field("*")

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_cors_methods_list(self) -> List[str]:
        """Get CORS methods as a list."""
        if self.CORS_METHODS == "*":
            return ["*"]
        return [method.strip() for method in self.CORS_METHODS.split(",")]

    def get_cors_headers_list(self) -> List[str]:
        """Get CORS headers as a list."""
        if self.CORS_HEADERS == "*":
            return ["*"]
        return [header.strip() for header in self.CORS_HEADERS.split(",")]

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def load_job_catalog(path: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load a job catalog file.

    The file maps job titles to job data, e.g.
    ``{"Frontend Developer": {"courseId": "FE101", "requiredSkills": [...]}}``.

    Args:
        path: Catalog file path, defaults to JOBS_SEED_FILE

    Returns:
        Dict[str, Dict[str, Any]]: Catalog keyed by job title, in file order

    Raises:
        ValueError: If the file cannot be read or is not a JSON object
    """
    path = path or get_settings().JOBS_SEED_FILE
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"Job catalog file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ValueError(f"Error reading job catalog: {e}")

    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Error loading job catalog: {e}")

    if not isinstance(data, dict):
        raise ValueError("Job catalog must be a JSON object keyed by job title")

    return data
