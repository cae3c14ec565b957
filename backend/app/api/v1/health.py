"""
Health Check API v1 Endpoints

System health and status monitoring endpoints.
"""

from typing import Dict, Any
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import text

from app.core.config import get_settings
from app.core.database import DatabaseManager
from app.api.deps import get_database
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/status")
async def detailed_status(database: DatabaseManager = Depends(get_database)) -> Dict[str, Any]:
    """Detailed system status including database reachability."""
    settings = get_settings()
    try:
        async with database.session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Status check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unhealthy"
        )

    return {
        "status": "healthy",
        "services": {
            "api": "healthy",
            "database": "healthy"
        },
        "app_info": {
            "name": settings.APP_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT
        }
    }
