"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from askit.application.assembly import UserView
from askit.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from askit.config import Settings
from askit.domain.service import AuthService
from askit.interface.api.envelope import ApiResponse, ok
from askit.interface.api.security import require_user

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    username: str = Field(min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_]+$")
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=1)


class LoginAPIRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UpdateProfileAPIRequest(BaseModel):
    username: str | None = Field(
        default=None, min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_]+$"
    )
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=500)


class ChangePasswordAPIRequest(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the token as an HTTP-only cookie."""
    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        path="/",
    )


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterAPIRequest,
    response: Response,
    use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> ApiResponse[AuthResponse]:
    """Create an account.

    Returns the new user and a token; the token is also set as a cookie.
    """
    result = await use_case.execute(
        RegisterRequest(username=body.username, email=body.email, password=body.password)
    )
    _set_auth_cookie(response, result.token, settings)
    return ok(result, "User registered successfully")


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(
    body: LoginAPIRequest,
    response: Response,
    use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> ApiResponse[AuthResponse]:
    """Sign in with email and password."""
    result = await use_case.execute(LoginRequest(email=body.email, password=body.password))
    _set_auth_cookie(response, result.token, settings)
    return ok(result, "Login successful")


@router.get("/me", response_model=ApiResponse[GetCurrentUserResponse])
async def me(
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[GetCurrentUserUseCase],
) -> ApiResponse[GetCurrentUserResponse]:
    """Current user with the actions their reputation unlocks."""
    actor = await require_user(request, auth_service)
    return ok(await use_case.execute(GetCurrentUserRequest(actor=actor)))


@router.put("/profile", response_model=ApiResponse[UserView])
async def update_profile(
    body: UpdateProfileAPIRequest,
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[UpdateProfileUseCase],
) -> ApiResponse[UserView]:
    actor = await require_user(request, auth_service)
    user = await use_case.execute(
        UpdateProfileRequest(
            actor=actor,
            username=body.username,
            bio=body.bio,
            avatar_url=body.avatar_url,
        )
    )
    return ok(user, "Profile updated successfully")


@router.put("/change-password", response_model=ApiResponse[None])
async def change_password(
    body: ChangePasswordAPIRequest,
    request: Request,
    auth_service: FromDishka[AuthService],
    use_case: FromDishka[ChangePasswordUseCase],
) -> ApiResponse[None]:
    actor = await require_user(request, auth_service)
    await use_case.execute(
        ChangePasswordRequest(
            actor=actor,
            current_password=body.current_password,
            new_password=body.new_password,
        )
    )
    return ok(message="Password changed successfully")


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response, settings: FromDishka[Settings]) -> ApiResponse[None]:
    """Clear the auth cookie.

    Tokens are stateless, so a client holding the token in a header just drops it.
    """
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    logfire.info("User logged out")
    return ok(message="Logged out successfully")
