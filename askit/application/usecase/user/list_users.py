"""List users use case (admin)."""

from pydantic import BaseModel, Field

from askit.application.assembly import Pagination, UserView, page_offset
from askit.config import PaginationSettings
from askit.domain.model import User
from askit.domain.repository import UserSortOrder
from askit.domain.service import PermissionService, UserService
from askit.domain.value import Role


class ListUsersRequest(BaseModel):
    """List users request."""

    actor: User
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: UserSortOrder = UserSortOrder.REPUTATION
    search: str | None = None
    role: Role | None = None


class ListUsersResponse(BaseModel):
    users: list[UserView]
    pagination: Pagination


class ListUsersUseCase:
    """Use case for the admin user listing."""

    def __init__(
        self,
        user_service: UserService,
        permission_service: PermissionService,
        pagination: PaginationSettings,
    ) -> None:
        self.user_service = user_service
        self.permission_service = permission_service
        self.pagination = pagination

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            ForbiddenError: If the user is not an admin
        """
        self.permission_service.require_admin(request.actor)
        limit = self.pagination.page_size(request.limit)
        users, total = await self.user_service.list_users(
            sort=request.sort,
            search=request.search.strip() if request.search else None,
            role=request.role,
            limit=limit,
            offset=page_offset(request.page, limit),
        )
        return ListUsersResponse(
            users=[UserView.from_user(user) for user in users],
            pagination=Pagination.build(request.page, limit, total),
        )
