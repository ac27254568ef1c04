"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .get_user_stats import GetUserStatsRequest, GetUserStatsResponse, GetUserStatsUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .moderate_user import (
    BanUserRequest,
    BanUserUseCase,
    ChangeRoleRequest,
    ChangeRoleUseCase,
    DeleteUserRequest,
    DeleteUserUseCase,
)

__all__ = [
    "BanUserRequest",
    "BanUserUseCase",
    "ChangeRoleRequest",
    "ChangeRoleUseCase",
    "DeleteUserRequest",
    "DeleteUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "GetUserStatsRequest",
    "GetUserStatsResponse",
    "GetUserStatsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
]
