"""Signing and checking the bearer tokens handed out at login."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from askit.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "exp"]


class TokenPayload(BaseModel):
    """Claims carried by an AskIt token."""

    user_id: str
    exp: datetime
    iat: datetime | None = None


class JWTError(Exception):
    """Token is malformed, tampered with or expired."""


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for a user, valid for ``settings.jwt_expiry_days``.

    Args:
        user_id: User ID
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**claims)
    except ValueError:
        raise JWTError("Invalid token")
