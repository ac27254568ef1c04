"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askit.domain.model import Notification
from askit.domain.repository import NotificationRepository
from askit.domain.value import NotificationId, NotificationType, UserId
from askit.persistence.mappers import notification_to_dict, row_to_notification
from askit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filters(
        self,
        stmt,
        recipient_id: UserId,
        unread_only: bool,
        type: Optional[NotificationType],
    ):
        stmt = stmt.where(
            notifications_table.c.recipient_id == recipient_id,
            notifications_table.c.is_deleted.is_(False),
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        if type is not None:
            stmt = stmt.where(notifications_table.c.type == type.value)
        return stmt

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id,
            notifications_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """List a recipient's notifications, newest first."""
        stmt = self._apply_filters(
            select(notifications_table), recipient_id, unread_only, type
        )
        stmt = (
            stmt.order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> int:
        stmt = self._apply_filters(
            select(func.count()).select_from(notifications_table),
            recipient_id,
            unread_only,
            type,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, notification: Notification) -> Notification:
        """Save a notification inside a savepoint."""
        with logfire.span(
            "notification_repository.save",
            notification_id=str(notification.id),
            recipient_id=str(notification.recipient_id),
        ):
            notification_dict = notification_to_dict(notification)
            stmt = insert(notifications_table).values(**notification_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[notifications_table.c.id],
                set_={
                    "is_read": notification.is_read,
                    "read_at": notification.read_at,
                    "is_deleted": notification.is_deleted,
                },
            )
            async with self.session.begin_nested():
                await self.session.execute(stmt)
            return notification

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread, undeleted notification of a recipient as read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
                notifications_table.c.is_deleted.is_(False),
            )
            .values(is_read=True, read_at=read_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def soft_delete_all(self, recipient_id: UserId) -> int:
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_deleted.is_(False),
            )
            .values(is_deleted=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def purge_read_before(self, cutoff: datetime) -> int:
        """Hard-delete read notifications created before the cutoff."""
        with logfire.span("notification_repository.purge_read_before", cutoff=cutoff):
            stmt = delete(notifications_table).where(
                notifications_table.c.is_read.is_(True),
                notifications_table.c.created_at < cutoff,
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount or 0
