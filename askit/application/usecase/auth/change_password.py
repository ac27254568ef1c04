"""Change password use case."""

from pydantic import BaseModel

from askit.domain.model import User
from askit.domain.service import AuthService


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    actor: User
    current_password: str
    new_password: str


class ChangePasswordUseCase:
    """Use case for replacing the authenticated user's password."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: ChangePasswordRequest) -> None:
        await self.auth_service.change_password(
            request.actor, request.current_password, request.new_password
        )
