"""Update profile use case."""

from pydantic import BaseModel, Field

from askit.application.assembly import UserView
from askit.domain.model import User
from askit.domain.service import PermissionService, UserService


class UpdateProfileRequest(BaseModel):
    """Update profile request. Unset fields are left unchanged."""

    actor: User
    username: str | None = Field(
        default=None, min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_]+$"
    )
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=500)


class UpdateProfileUseCase:
    """Use case for editing the authenticated user's profile."""

    def __init__(
        self, user_service: UserService, permission_service: PermissionService
    ) -> None:
        self.user_service = user_service
        self.permission_service = permission_service

    async def execute(self, request: UpdateProfileRequest) -> UserView:
        """Execute update profile flow.

        Raises:
            ForbiddenError: If the user is banned
            BusinessRuleViolationError: If the username is taken
        """
        self.permission_service.ensure_active(request.actor)
        user = await self.user_service.update_profile(
            request.actor,
            username=request.username,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        return UserView.from_user(user)
