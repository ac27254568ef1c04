"""Token extraction and current-user resolution for routes."""

import logfire
from fastapi import Request

from askit.domain.error import AuthenticationError, ForbiddenError
from askit.domain.model import User
from askit.domain.service import AuthService
from askit.util.jwt import JWTError

BEARER_PREFIX = "Bearer "


def extract_token(request: Request, cookie_name: str) -> str | None:
    """Read the token from the Authorization header, falling back to the cookie."""
    header = request.headers.get("Authorization")
    if header and header.startswith(BEARER_PREFIX):
        token = header[len(BEARER_PREFIX):].strip()
        if token:
            return token
    return request.cookies.get(cookie_name) or None


async def require_user(request: Request, auth_service: AuthService) -> User:
    """Resolve the authenticated user.

    Raises:
        AuthenticationError: If no token was sent or its user is gone
        JWTError: If the token is invalid or expired
        ForbiddenError: If the user is banned
    """
    token = extract_token(request, auth_service.auth_settings.cookie_name)
    if not token:
        raise AuthenticationError("Not authorized, no token")
    return await auth_service.authenticate(token)


async def optional_user(request: Request, auth_service: AuthService) -> User | None:
    """Resolve the user when a usable token was sent, None otherwise."""
    token = extract_token(request, auth_service.auth_settings.cookie_name)
    if not token:
        return None
    try:
        return await auth_service.authenticate(token)
    except (JWTError, AuthenticationError, ForbiddenError) as e:
        # Public endpoints treat a bad token as anonymous
        logfire.debug("Ignoring unusable token", error=str(e))
        return None
