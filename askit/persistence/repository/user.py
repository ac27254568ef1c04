"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import asc, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askit.domain.model import User
from askit.domain.repository import UserRepository, UserSortOrder
from askit.domain.value import Role, UserId
from askit.persistence.mappers import row_to_user, user_to_dict
from askit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_active(self):
        return select(users_table).where(users_table.c.is_deleted.is_(False))

    def _apply_filters(self, stmt, search: Optional[str], role: Optional[Role]):
        stmt = stmt.where(users_table.c.is_deleted.is_(False))
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    users_table.c.username.ilike(pattern),
                    users_table.c.email.ilike(pattern),
                )
            )
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        return stmt

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = self._select_active().where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query."""
        if not user_ids:
            return []
        stmt = self._select_active().where(users_table.c.id.in_(set(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = self._select_active().where(users_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = self._select_active().where(users_table.c.email == email.lower())
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(
        self,
        sort: UserSortOrder = UserSortOrder.REPUTATION,
        search: Optional[str] = None,
        role: Optional[Role] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[User]:
        """List users with filtering and pagination."""
        stmt = self._apply_filters(select(users_table), search, role)

        if sort == UserSortOrder.REPUTATION:
            stmt = stmt.order_by(
                desc(users_table.c.reputation), asc(users_table.c.created_at)
            )
        elif sort == UserSortOrder.NEWEST:
            stmt = stmt.order_by(desc(users_table.c.created_at))
        elif sort == UserSortOrder.OLDEST:
            stmt = stmt.order_by(asc(users_table.c.created_at))
        elif sort == UserSortOrder.USERNAME:
            stmt = stmt.order_by(asc(users_table.c.username))

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count(
        self, search: Optional[str] = None, role: Optional[Role] = None
    ) -> int:
        stmt = self._apply_filters(
            select(func.count()).select_from(users_table), search, role
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in user_dict.items() if k not in ("id", "created_at")},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def touch_last_active(self, user_id: UserId) -> None:
        """Set last_active to the database clock."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(last_active=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()
