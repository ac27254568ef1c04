"""Builders for domain objects used across tests."""

from uuid import uuid4

from askit.domain.model import User
from askit.domain.value import Role, UserId


def make_user(
    username: str = "alice",
    reputation: int = 0,
    role: Role = Role.USER,
    is_banned: bool = False,
) -> User:
    """Build an unsaved user."""
    return User(
        id=UserId(uuid4()),
        username=username,
        email=f"{username}@example.com",
        password_hash="not-a-real-hash",
        reputation=reputation,
        role=role,
        is_banned=is_banned,
    )
