"""
User Service Layer

Signup and login. Password hashing and token issuance are delegated to
the security manager.
"""

from typing import Optional, Tuple

from app.core.exceptions import (
    InvalidCredentialsException,
    MissingFieldsException,
    UserAlreadyExistsException,
)
from app.core.security import SecurityManager
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.utils.logger import LoggerMixin, log_security_event


class UserService(LoggerMixin):
    """Service layer for account operations."""

    def __init__(self, user_repo: UserRepository, security: SecurityManager):
        self.user_repo = user_repo
        self.security = security

    async def signup(
        self,
        username: Optional[str],
        password: Optional[str],
        user_type: Optional[str]
    ) -> User:
        """
        Register a new account.

        Raises:
            MissingFieldsException: If any field is empty
            UserAlreadyExistsException: If the username is taken
        """
        missing = [
            name for name, value in
            (("username", username), ("password", password), ("type", user_type))
            if not value
        ]
        if missing:
            raise MissingFieldsException(
                missing,
                user_message="Username, password, and type are required"
            )

        if await self.user_repo.get_by_username(username):
            log_security_event("signup_duplicate", success=False, username=username)
            raise UserAlreadyExistsException(username)

        user = await self.user_repo.create({
            "username": username,
            "hashed_password": self.security.hash_password(password),
            "user_type": user_type,
        })
        log_security_event("signup", user_id=str(user.id), username=username)
        return user

    async def login(
        self,
        username: Optional[str],
        password: Optional[str]
    ) -> Tuple[str, User]:
        """
        Verify credentials and issue a bearer token.

        Returns:
            Tuple[str, User]: Signed access token and the account

        Raises:
            MissingFieldsException: If username or password is empty
            InvalidCredentialsException: If the user is unknown or the password is wrong
        """
        if not username or not password:
            raise MissingFieldsException(
                [name for name, value in (("username", username), ("password", password)) if not value],
                user_message="Username and password required"
            )

        user = await self.user_repo.get_by_username(username)
        if user is None or not self.security.verify_password(password, user.hashed_password):
            log_security_event("login", success=False, username=username)
            raise InvalidCredentialsException()

        token = self.security.create_access_token({
            "sub": str(user.id),
            "username": user.username,
            "type": user.user_type,
        })
        log_security_event("login", user_id=str(user.id), username=username)
        self.logger.debug("Issued access token", user_id=user.id)
        return token, user
