"""Get current user use case."""

from pydantic import BaseModel

from askit.application.assembly import UserView
from askit.domain.model import User
from askit.domain.service import PermissionService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    actor: User


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserView
    capabilities: dict[str, bool]


class GetCurrentUserUseCase:
    """Use case for describing the authenticated user and what they may do."""

    def __init__(self, permission_service: PermissionService) -> None:
        self.permission_service = permission_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        return GetCurrentUserResponse(
            user=UserView.from_user(request.actor),
            capabilities=self.permission_service.capabilities(request.actor),
        )
