"""User aggregate root.

Users register with a username, email and password and accumulate
reputation that unlocks voting, commenting and tag creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askit.domain.model.common import DomainModel, utcnow
from askit.domain.value import Role, UserId


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Username is 3-30 characters of letters, digits and underscores
    - Email is stored lowercased
    - Banned or soft-deleted users cannot authenticate
    """

    id: UserId
    username: str = Field(min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_]+$")
    email: str = Field(max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password_hash: str
    role: Role = Role.USER
    reputation: int = 0
    bio: str = Field(default="", max_length=500)
    avatar_url: Optional[str] = None
    is_banned: bool = False
    is_deleted: bool = False
    last_active: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def touch(self, now: datetime | None = None) -> "User":
        """Record activity."""
        return self.model_copy(update={"last_active": now or utcnow()})

    def update_profile(
        self,
        username: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> "User":
        """Return a copy with the given profile fields replaced.

        Goes through validation so an invalid username is rejected here.
        """
        data = self.model_dump()
        if username is not None:
            data["username"] = username
        if bio is not None:
            data["bio"] = bio
        if avatar_url is not None:
            data["avatar_url"] = avatar_url
        data["updated_at"] = utcnow()
        return User.model_validate(data)

    def with_password_hash(self, password_hash: str) -> "User":
        return self.model_copy(
            update={"password_hash": password_hash, "updated_at": utcnow()}
        )

    def set_banned(self, banned: bool) -> "User":
        return self.model_copy(update={"is_banned": banned, "updated_at": utcnow()})

    def change_role(self, role: Role) -> "User":
        return self.model_copy(update={"role": role, "updated_at": utcnow()})

    def soft_delete(self) -> "User":
        return self.model_copy(update={"is_deleted": True, "updated_at": utcnow()})
