"""User repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from askit.domain.model.user import User
from askit.domain.value import Role, UserId


class UserSortOrder(str, Enum):
    """Sort order for the admin user listing."""

    REPUTATION = "reputation"
    NEWEST = "newest"
    OLDEST = "oldest"
    USERNAME = "username"


class UserRepository(ABC):
    """Repository for User aggregate.

    Soft-deleted users are invisible to every finder unless stated otherwise.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query (order not guaranteed).

        Args:
            user_ids: User IDs to load

        Returns:
            The users that exist and are not deleted
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (exact match)."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (stored lowercased)."""
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        search: Optional[str] = None,
        role: Optional[Role] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """List users for administration.

        Args:
            sort: Sort order
            search: Case-insensitive substring matched against username and email
            role: Only users with this role
            limit: Maximum number of users to return
            offset: Number of users to skip

        Returns:
            Matching users
        """
        pass

    @abstractmethod
    async def count(
        self, search: Optional[str] = None, role: Optional[Role] = None
    ) -> int:
        """Count users matching the same filters as ``find_all``."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def touch_last_active(self, user_id: UserId) -> None:
        """Set ``last_active`` to now without rewriting the row."""
        pass
