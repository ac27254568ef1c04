"""Login use case."""

from pydantic import BaseModel

from askit.application.assembly import UserView
from askit.domain.service import AuthService

from .register import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for signing in with email and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials don't match
            ForbiddenError: If the account is banned
        """
        result = await self.auth_service.login(request.email, request.password)
        return AuthResponse(user=UserView.from_user(result.user), token=result.token)
