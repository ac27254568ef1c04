"""Admin moderation use cases: ban, role change and deletion."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import UserView
from askit.domain.model import User
from askit.domain.service import PermissionService, UserService
from askit.domain.value import Role, UserId


class BanUserRequest(BaseModel):
    actor: User
    user_id: str
    is_banned: bool


class ChangeRoleRequest(BaseModel):
    actor: User
    user_id: str
    role: Role


class DeleteUserRequest(BaseModel):
    actor: User
    user_id: str


class BanUserUseCase:
    """Use case for banning or unbanning a user."""

    def __init__(
        self, user_service: UserService, permission_service: PermissionService
    ) -> None:
        self.user_service = user_service
        self.permission_service = permission_service

    async def execute(self, request: BanUserRequest) -> UserView:
        """Execute ban flow.

        Raises:
            ForbiddenError: If the actor is not an admin
            NotFoundError: If the user doesn't exist
            BusinessRuleViolationError: If the target is an admin
        """
        self.permission_service.require_admin(request.actor)
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        updated = await self.user_service.set_banned(user, request.is_banned)
        return UserView.from_user(updated)


class ChangeRoleUseCase:
    """Use case for promoting or demoting a user."""

    def __init__(
        self, user_service: UserService, permission_service: PermissionService
    ) -> None:
        self.user_service = user_service
        self.permission_service = permission_service

    async def execute(self, request: ChangeRoleRequest) -> UserView:
        self.permission_service.require_admin(request.actor)
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        updated = await self.user_service.change_role(user, request.role, request.actor)
        return UserView.from_user(updated)


class DeleteUserUseCase:
    """Use case for soft-deleting a user."""

    def __init__(
        self, user_service: UserService, permission_service: PermissionService
    ) -> None:
        self.user_service = user_service
        self.permission_service = permission_service

    async def execute(self, request: DeleteUserRequest) -> None:
        self.permission_service.require_admin(request.actor)
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.user_service.delete_user(user)
