"""User routes: public profiles and admin moderation."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import AliasChoices, BaseModel, Field

from askit.application.assembly import UserView
from askit.application.usecase.user import (
    BanUserRequest,
    BanUserUseCase,
    ChangeRoleRequest,
    ChangeRoleUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    GetUserStatsRequest,
    GetUserStatsResponse,
    GetUserStatsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
)
from askit.domain.repository.user import UserSortOrder
from askit.domain.service import AuthService
from askit.domain.value import Role
from askit.interface.api.envelope import ApiResponse, ok
from askit.interface.api.security import require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class BanUserAPIRequest(BaseModel):
    is_banned: bool = Field(validation_alias=AliasChoices("is_banned", "isBanned"))


class ChangeRoleAPIRequest(BaseModel):
    role: Role


@router.get("", response_model=ApiResponse[ListUsersResponse])
async def list_users(
    request: Request,
    use_case: FromDishka[ListUsersUseCase],
    auth_service: FromDishka[AuthService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: UserSortOrder = UserSortOrder.REPUTATION,
    search: str | None = None,
    role: Role | None = None,
) -> ApiResponse[ListUsersResponse]:
    """List users. Admin only."""
    actor = await require_user(request, auth_service)
    result = await use_case.execute(
        ListUsersRequest(
            actor=actor, page=page, limit=limit, sort=sort, search=search, role=role
        )
    )
    return ok(result)


@router.get("/{user_id}/stats", response_model=ApiResponse[GetUserStatsResponse])
async def get_user_stats(
    user_id: UUID,
    use_case: FromDishka[GetUserStatsUseCase],
) -> ApiResponse[GetUserStatsResponse]:
    return ok(await use_case.execute(GetUserStatsRequest(user_id=str(user_id))))


@router.get("/{username}", response_model=ApiResponse[GetUserProfileResponse])
async def get_user_profile(
    username: str,
    use_case: FromDishka[GetUserProfileUseCase],
) -> ApiResponse[GetUserProfileResponse]:
    """Public profile by username, with stats and recent activity.

    Example:
        GET /api/users/alice

        Response:
        {
            "success": true,
            "data": {
                "user": {"username": "alice", "reputation": 42, ...},
                "question_count": 3,
                "answer_count": 7,
                "accepted_answer_count": 2,
                "total_votes": 12,
                "recent_questions": [...],
                "recent_answers": [...]
            }
        }
    """
    return ok(await use_case.execute(GetUserProfileRequest(username=username)))


@router.put("/{user_id}/ban", response_model=ApiResponse[UserView])
async def ban_user(
    user_id: UUID,
    body: BanUserAPIRequest,
    request: Request,
    use_case: FromDishka[BanUserUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[UserView]:
    """Ban or unban a user. Admin only."""
    actor = await require_user(request, auth_service)
    user = await use_case.execute(
        BanUserRequest(actor=actor, user_id=str(user_id), is_banned=body.is_banned)
    )
    return ok(user, "User banned" if user.is_banned else "User unbanned")


@router.put("/{user_id}/role", response_model=ApiResponse[UserView])
async def change_role(
    user_id: UUID,
    body: ChangeRoleAPIRequest,
    request: Request,
    use_case: FromDishka[ChangeRoleUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[UserView]:
    """Change a user's role. Admin only."""
    actor = await require_user(request, auth_service)
    user = await use_case.execute(
        ChangeRoleRequest(actor=actor, user_id=str(user_id), role=body.role)
    )
    return ok(user, "User role updated")


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteUserUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[None]:
    """Delete a user. Admin only; admins themselves cannot be deleted."""
    actor = await require_user(request, auth_service)
    await use_case.execute(DeleteUserRequest(actor=actor, user_id=str(user_id)))
    return ok(message="User deleted successfully")
