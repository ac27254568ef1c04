"""Register use case."""

from pydantic import BaseModel, Field

from askit.application.assembly import UserView
from askit.domain.service import AuthService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = Field(min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_]+$")
    email: str = Field(max_length=255)
    password: str


class AuthResponse(BaseModel):
    """Signed-in user with a token."""

    user: UserView
    token: str


class RegisterUseCase:
    """Use case for creating an account."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Create the account and return a token for it.

        Raises:
            BusinessRuleViolationError: If the email or username is taken
            ValidationError: If the password is too weak
        """
        result = await self.auth_service.register(
            request.username.strip(), request.email, request.password
        )
        return AuthResponse(user=UserView.from_user(result.user), token=result.token)
