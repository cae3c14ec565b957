"""
User API v1 Endpoints

Signup, login and current-user endpoints.
"""

from fastapi import APIRouter, Depends, status

from app.core.security import get_current_user
from app.schemas.user import (
    CurrentUser,
    CurrentUserResponse,
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    UserPublic,
)
from app.api.deps import get_user_service
from app.services.user_service import UserService
from app.utils.logger import get_logger, log_api_request

logger = get_logger(__name__)
router = APIRouter(prefix="/user", tags=["users"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    body: SignupRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Create an account."""
    log_api_request("POST", "/user/signup")
    user = await user_service.signup(body.username, body.password, body.type)
    return SignupResponse(
        message="User created",
        user=UserPublic(id=user.id, username=user.username, type=user.user_type)
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Exchange credentials for a bearer token."""
    log_api_request("POST", "/user/login")
    token, user = await user_service.login(body.username, body.password)
    return LoginResponse(message="Login successful", token=token, type=user.user_type)


@router.get("/me", response_model=CurrentUserResponse)
async def me(current_user: CurrentUser = Depends(get_current_user)):
    """Identity of the bearer."""
    return CurrentUserResponse(user=current_user)
