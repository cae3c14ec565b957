"""
Custom Exceptions for SkillMatch

Business logic exceptions with user-friendly messages and proper error codes.
"""

from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from enum import Enum

from fastapi import status


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    SYSTEM = "system"
    CONFIGURATION = "configuration"


class BaseApplicationException(Exception):
    """
    Base exception for all application-specific errors.

    Provides structured error information for consistent error handling
    and user-friendly error responses.
    """

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        suggested_action: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details or {}
        self.suggested_action = suggested_action
        self.headers = headers
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "detail": self.user_message,
            "error_code": self.error_code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
            "suggested_action": self.suggested_action
        }


# Validation Exceptions
class ValidationException(BaseApplicationException):
    """Exception for input validation errors."""

    def __init__(
        self,
        message: str,
        field_errors: Optional[Dict[str, str]] = None,
        user_message: Optional[str] = None,
        error_code: str = "VALIDATION_ERROR",
        **kwargs
    ):
        super().__init__(
            message=message,
            user_message=user_message or message,
            error_code=error_code,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )
        self.field_errors = field_errors or {}
        self.details.update({"field_errors": self.field_errors})


class MissingFieldsException(ValidationException):
    """Exception for requests missing required fields."""

    def __init__(self, fields: List[str], user_message: Optional[str] = None, **kwargs):
        super().__init__(
            message=f"Missing required fields: {', '.join(fields)}",
            user_message=user_message,
            error_code="MISSING_FIELDS",
            field_errors={field: "This field is required" for field in fields},
            **kwargs
        )


class InvalidSkillsInputException(ValidationException):
    """Exception for a skills upload that is not a non-empty string."""

    def __init__(self, **kwargs):
        super().__init__(
            message="Skills string is required",
            error_code="INVALID_SKILLS_INPUT",
            field_errors={"skills": "Expected a comma-separated string"},
            suggested_action="Send skills as a comma-separated string",
            **kwargs
        )


class InvalidCredentialsException(ValidationException):
    """Exception for a failed login."""

    def __init__(self, **kwargs):
        super().__init__(
            message="Invalid credentials",
            error_code="INVALID_CREDENTIALS",
            **kwargs
        )


class UserAlreadyExistsException(ValidationException):
    """Exception for signing up with a taken username."""

    def __init__(self, username: str, **kwargs):
        super().__init__(
            message=f"User already exists: {username}",
            user_message="User already exists",
            error_code="USER_EXISTS",
            field_errors={"username": "Already taken"},
            **kwargs
        )


# Authentication Exceptions
class AuthenticationException(BaseApplicationException):
    """Exception for authentication errors."""

    def __init__(
        self,
        message: str = "No token provided",
        error_code: str = "AUTH_REQUIRED",
        **kwargs
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.AUTHENTICATION,
            severity=ErrorSeverity.MEDIUM,
            http_status=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
            **kwargs
        )


class InvalidTokenException(AuthenticationException):
    """Exception for invalid or expired authentication tokens."""

    def __init__(self, **kwargs):
        super().__init__(
            message="Invalid token",
            error_code="INVALID_TOKEN",
            suggested_action="Log in again",
            **kwargs
        )


# Resource Exceptions
class ResourceNotFoundException(BaseApplicationException):
    """Exception for resource not found errors."""

    def __init__(self, resource_type: str, resource_id: Optional[str] = None, **kwargs):
        super().__init__(
            message=f"{resource_type} not found",
            error_code="RESOURCE_NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            **kwargs
        )


class JobNotFoundException(ResourceNotFoundException):
    """Exception for a job title missing from the catalog."""

    def __init__(self, title: str, **kwargs):
        super().__init__(resource_type="Job", resource_id=title, **kwargs)


class DuplicateResourceException(BaseApplicationException):
    """Exception for creating a resource whose key already exists."""

    def __init__(self, resource_type: str, key: str, **kwargs):
        super().__init__(
            message=f"{resource_type} already exists: {key}",
            user_message=f"{resource_type} already exists",
            error_code="DUPLICATE_RESOURCE",
            category=ErrorCategory.CONFLICT,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "key": key},
            **kwargs
        )


# Storage Exceptions
class StorageException(BaseApplicationException):
    """Exception for record store failures."""

    def __init__(self, message: str = "Storage operation failed", **kwargs):
        super().__init__(
            message=message,
            user_message="Storage operation failed",
            error_code="STORAGE_ERROR",
            category=ErrorCategory.STORAGE,
            severity=ErrorSeverity.HIGH,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            suggested_action="Retry later",
            **kwargs
        )


# Configuration Exceptions
class ConfigurationException(BaseApplicationException):
    """Exception for configuration errors."""

    def __init__(self, config_key: str, reason: str = "invalid", **kwargs):
        super().__init__(
            message=f"Configuration error for {config_key}: {reason}",
            user_message="Service misconfigured",
            error_code="CONFIGURATION_ERROR",
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.CRITICAL,
            details={"config_key": config_key},
            **kwargs
        )
