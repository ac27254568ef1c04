"""Authentication use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginUseCase
from .register import AuthResponse, RegisterRequest, RegisterUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
