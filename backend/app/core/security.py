"""
Security and Authentication

Handles JWT token creation/validation and password hashing for the
SkillMatch application.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone

from passlib.context import CryptContext
from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import get_settings
from app.core.exceptions import AuthenticationException, InvalidTokenException
from app.schemas.user import CurrentUser
from app.utils.logger import get_logger, log_security_event

# Initialize logger
logger = get_logger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# HTTP Bearer token scheme
bearer_scheme = HTTPBearer(auto_error=False)


class SecurityManager:
    """Security and authentication manager."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        access_token_expire_minutes: Optional[int] = None
    ) -> None:
        """Initialize security manager from settings unless overridden."""
        settings = get_settings()
        self.secret_key = secret_key or settings.SECRET_KEY
        self.algorithm = algorithm or settings.ALGORITHM
        self.access_token_expire_minutes = (
            access_token_expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    def create_access_token(
        self,
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode
            expires_delta: Token expiration time

        Returns:
            str: Encoded JWT token
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        if expires_delta is None:
            expires_delta = timedelta(minutes=self.access_token_expire_minutes)

        to_encode.update({"exp": now + expires_delta, "iat": now})

        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT token.

        Args:
            token: JWT token to verify

        Returns:
            Dict[str, Any]: Decoded token payload

        Raises:
            InvalidTokenException: If token is invalid or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification error: {e}")
            raise InvalidTokenException()

    def hash_password(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            str: Hashed password
        """
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            plain_password: Plain text password
            hashed_password: Hashed password

        Returns:
            bool: True if password matches
        """
        return pwd_context.verify(plain_password, hashed_password)


def get_security_manager() -> SecurityManager:
    """Dependency returning a security manager bound to current settings."""
    return SecurityManager()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    security: SecurityManager = Depends(get_security_manager)
) -> CurrentUser:
    """
    Dependency to get current authenticated user.

    Args:
        credentials: HTTP authorization credentials
        security: Token verifier

    Returns:
        CurrentUser: Identity carried by the token

    Raises:
        AuthenticationException: If no bearer token was sent
        InvalidTokenException: If the token is invalid
    """
    if not credentials or credentials.scheme.lower() != "bearer":
        log_security_event("token_missing", success=False)
        raise AuthenticationException()

    payload = security.verify_token(credentials.credentials)

    # Extract user information from token
    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        log_security_event("token_payload_invalid", success=False)
        raise InvalidTokenException()

    return CurrentUser(
        id=user_id,
        username=payload.get("username"),
        type=payload.get("type"),
        exp=payload.get("exp"),
    )
