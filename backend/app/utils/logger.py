"""
Logging Configuration

Structured logging setup using structlog for consistent, JSON-formatted logs
throughout the SkillMatch application.
"""

import logging
import sys
from typing import Any, Dict, Optional
from pathlib import Path

import structlog
from structlog.stdlib import LoggerFactory
from pythonjsonlogger import jsonlogger

from app.core.config import get_settings

# Get settings
settings = get_settings()


def configure_logging() -> None:
    """Configure structured logging for the application."""

    # Configure structlog
    structlog.configure(
        processors=[
            # Add log level and timestamp
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),

            # Add context
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,

            # JSON formatting for production, pretty for development
            structlog.dev.ConsoleRenderer() if settings.DEBUG
            else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    # File handler for persistent logging
    if settings.LOG_TO_FILE:
        logs_dir = Path(settings.LOG_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(logs_dir / "app.log")
        file_handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )

        root_logger = logging.getLogger()
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get logger for this class."""
        return get_logger(self.__class__.__module__ + "." + self.__class__.__name__)


def log_api_request(
    method: str,
    path: str,
    user_id: Optional[str] = None,
    **kwargs
) -> None:
    """
    Log API request.

    Args:
        method: HTTP method
        path: Request path
        user_id: User ID making the request
        **kwargs: Additional request data
    """
    logger = get_logger("api_requests")
    logger.info(
        "API request",
        method=method,
        path=path,
        user_id=user_id,
        **kwargs
    )


def log_match_computation(
    user_id: Optional[str],
    jobs_considered: int,
    matches: int,
    threshold: int,
    **kwargs
) -> None:
    """
    Log the outcome of a skill match run.

    Args:
        user_id: User the matches were computed for
        jobs_considered: Number of catalog jobs examined
        matches: Number of jobs at or above the threshold
        threshold: Minimum match percentage used
        **kwargs: Additional match data
    """
    logger = get_logger("skill_matching")
    logger.info(
        "Skill match computed",
        user_id=user_id,
        jobs_considered=jobs_considered,
        matches=matches,
        threshold=threshold,
        **kwargs
    )


def log_store_operation(
    operation: str,
    table: str,
    record_id: Optional[Any] = None,
    user_id: Optional[str] = None,
    **kwargs
) -> None:
    """
    Log a record store operation.

    Args:
        operation: Type of operation (create, read, update, upsert)
        table: Table involved
        record_id: Record key being operated on
        user_id: User performing the operation
        **kwargs: Additional operation data
    """
    logger = get_logger("store")
    logger.info(
        "Store operation",
        operation=operation,
        table=table,
        record_id=record_id,
        user_id=user_id,
        **kwargs
    )


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    user_id: Optional[str] = None,
    **kwargs
) -> None:
    """
    Log error with context.

    Args:
        error: Exception that occurred
        context: Additional context about the error
        user_id: User ID associated with the error
        **kwargs: Additional error data
    """
    logger = get_logger("errors")
    logger.error(
        "Error occurred",
        error_type=type(error).__name__,
        error_message=str(error),
        context=context or {},
        user_id=user_id,
        **kwargs,
        exc_info=True
    )


def log_security_event(
    event_type: str,
    user_id: Optional[str] = None,
    success: bool = True,
    **kwargs
) -> None:
    """
    Log security-related event.

    Args:
        event_type: Type of security event
        user_id: User ID involved
        success: Whether the event was successful
        **kwargs: Additional security data
    """
    logger = get_logger("security")

    log_level = "info" if success else "warning"
    getattr(logger, log_level)(
        "Security event",
        event_type=event_type,
        user_id=user_id,
        success=success,
        **kwargs
    )


# Configure logging on import
configure_logging()
