"""In-memory user repository for testing."""

from typing import List, Optional, Sequence

from askit.domain.model.common import utcnow
from askit.domain.model.user import User
from askit.domain.repository.user import UserRepository, UserSortOrder
from askit.domain.value import Role, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _users(self) -> dict[UserId, User]:
        return self._store.users

    def _active(self) -> list[User]:
        return [u for u in self._users.values() if not u.is_deleted]

    def _filtered(self, search: Optional[str], role: Optional[Role]) -> list[User]:
        users = self._active()
        if search:
            needle = search.lower()
            users = [
                u
                for u in users
                if needle in u.username.lower() or needle in u.email.lower()
            ]
        if role is not None:
            users = [u for u in users if u.role == role]
        return users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        user = self._users.get(user_id)
        return user if user and not user.is_deleted else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        wanted = set(user_ids)
        return [u for u in self._active() if u.id in wanted]

    async def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._active() if u.username == username), None)

    async def find_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return next((u for u in self._active() if u.email == email), None)

    async def find_all(
        self,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        search: Optional[str] = None,
        role: Optional[Role] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """List users with filtering and pagination."""
        users = self._filtered(search, role)

        if sort == UserSortOrder.REPUTATION:
            users.sort(key=lambda u: (-u.reputation, u.created_at))
        elif sort == UserSortOrder.NEWEST:
            users.sort(key=lambda u: u.created_at, reverse=True)
        elif sort == UserSortOrder.OLDEST:
            users.sort(key=lambda u: u.created_at)
        elif sort == UserSortOrder.USERNAME:
            users.sort(key=lambda u: u.username)

        return users[offset : offset + limit]

    async def count(
        self, search: Optional[str] = None, role: Optional[Role] = None
    ) -> int:
        return len(self._filtered(search, role))

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def touch_last_active(self, user_id: UserId) -> None:
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.touch(utcnow())
