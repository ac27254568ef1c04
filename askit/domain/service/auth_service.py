"""Authentication domain service."""

import re
from dataclasses import dataclass
from uuid import UUID, uuid4

import logfire

from askit.config import AuthSettings
from askit.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ForbiddenError,
    ValidationError,
)
from askit.domain.model import User
from askit.domain.repository import UserRepository
from askit.domain.value import UserId
from askit.util.password import PasswordHasher

from .base import Service
from .jwt_service import JWTService


@dataclass
class AuthResult:
    """An authenticated user with a fresh token."""

    user: User
    token: str


class AuthService(Service):
    """Domain service for password authentication.

    Tokens carry only the user ID; the user is re-read on every request so a
    ban or deletion takes effect immediately.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        password_hasher: PasswordHasher,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            jwt_service: JWT service
            password_hasher: Password hasher
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.password_hasher = password_hasher
        self.auth_settings = auth_settings

    def check_password_policy(self, password: str) -> None:
        """Reject weak passwords.

        Raises:
            ValidationError: If the password is too short or lacks a lowercase
                letter, an uppercase letter or a digit
        """
        if len(password) < self.auth_settings.password_min_length:
            raise ValidationError(
                f"Password must be at least {self.auth_settings.password_min_length} characters"
            )
        if not (
            re.search(r"[a-z]", password)
            and re.search(r"[A-Z]", password)
            and re.search(r"\d", password)
        ):
            raise ValidationError(
                "Password must contain at least one lowercase letter, "
                "one uppercase letter and one number"
            )

    async def register(self, username: str, email: str, password: str) -> AuthResult:
        """Create an account and sign it in.

        Raises:
            BusinessRuleViolationError: If the email or username is taken
            ValidationError: If the password is too weak
        """
        email = email.strip().lower()
        with logfire.span("auth_service.register", username=username):
            self.check_password_policy(password)

            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email", username=username)
                raise BusinessRuleViolationError("User with this email already exists")
            if await self.user_repository.find_by_username(username):
                logfire.warn("Registration with existing username", username=username)
                raise BusinessRuleViolationError("Username already taken")

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=self.password_hasher.hash(password),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)

            return AuthResult(user=saved, token=self.jwt_service.create_token(str(saved.id)))

    async def login(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password.

        Raises:
            AuthenticationError: If the credentials don't match
            ForbiddenError: If the account is banned
        """
        email = email.strip().lower()
        with logfire.span("auth_service.login"):
            user = await self.user_repository.find_by_email(email)
            if not user or not self.password_hasher.verify(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise AuthenticationError("Invalid credentials")

            if user.is_banned:
                logfire.warn("Banned user login attempt", user_id=str(user.id))
                raise ForbiddenError("Your account has been banned")

            user = await self.user_repository.save(user.touch())
            logfire.info("User logged in", user_id=str(user.id))
            return AuthResult(user=user, token=self.jwt_service.create_token(str(user.id)))

    async def authenticate(self, token: str) -> User:
        """Resolve a bearer token to an active user and refresh its activity.

        Raises:
            JWTError: If the token is invalid or expired
            AuthenticationError: If the user no longer exists
            ForbiddenError: If the user is banned
        """
        payload = self.jwt_service.verify_token(token)
        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise AuthenticationError("Invalid token")

        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("Token for unknown user", user_id=payload.user_id)
            raise AuthenticationError("User not found")
        if user.is_banned:
            raise ForbiddenError("Your account has been banned")

        await self.user_repository.touch_last_active(user.id)
        return user

    async def change_password(
        self, user: User, current_password: str, new_password: str
    ) -> None:
        """Replace the user's password after checking the current one.

        Raises:
            ValidationError: If the current password is wrong or the new one is weak
        """
        with logfire.span("auth_service.change_password", user_id=str(user.id)):
            if not self.password_hasher.verify(current_password, user.password_hash):
                logfire.warn("Wrong current password", user_id=str(user.id))
                raise ValidationError("Current password is incorrect")

            self.check_password_policy(new_password)
            await self.user_repository.save(
                user.with_password_hash(self.password_hasher.hash(new_password))
            )
            logfire.info("Password changed", user_id=str(user.id))
