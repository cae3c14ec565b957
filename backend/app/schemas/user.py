"""
User Pydantic Schemas

Request/response models for account endpoints.
"""

from typing import Optional, Any

from pydantic import Field

from app.schemas.base import CamelModel


class SignupRequest(CamelModel):
    """Signup body. Missing fields are reported as 400 by the service."""

    username: Optional[str] = Field(None, max_length=150, description="Username")
    password: Optional[str] = Field(None, description="Plain text password")
    type: Optional[str] = Field(None, max_length=50, description="Account type")


class LoginRequest(CamelModel):
    """Login body."""

    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Plain text password")


class UserPublic(CamelModel):
    """Public view of an account."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    type: str = Field(..., description="Account type")


class SignupResponse(CamelModel):
    message: str
    user: UserPublic


class LoginResponse(CamelModel):
    message: str
    token: str = Field(..., description="Bearer token")
    type: str = Field(..., description="Account type")


class CurrentUser(CamelModel):
    """Identity decoded from a bearer token."""

    id: int = Field(..., description="User ID")
    username: Optional[str] = Field(None, description="Username")
    type: Optional[str] = Field(None, description="Account type")
    exp: Optional[Any] = Field(None, description="Token expiry (epoch seconds)")


class CurrentUserResponse(CamelModel):
    user: CurrentUser
