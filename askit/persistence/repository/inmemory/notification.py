"""In-memory notification repository for testing."""

from datetime import datetime
from typing import List, Optional

from askit.domain.model.notification import Notification
from askit.domain.repository.notification import NotificationRepository
from askit.domain.value import NotificationId, NotificationType, UserId

from .store import InMemoryStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _notifications(self) -> dict[NotificationId, Notification]:
        return self._store.notifications

    def _filtered(
        self,
        recipient_id: UserId,
        unread_only: bool,
        type: Optional[NotificationType],
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id
            and not n.is_deleted
            and (not unread_only or not n.is_read)
            and (type is None or n.type == type)
        ]

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        notification = self._notifications.get(notification_id)
        return notification if notification and not notification.is_deleted else None

    async def find_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        notifications = self._filtered(recipient_id, unread_only, type)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> int:
        return len(self._filtered(recipient_id, unread_only, type))

    async def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        unread = self._filtered(recipient_id, unread_only=True, type=None)
        for notification in unread:
            self._notifications[notification.id] = notification.mark_read(read_at)
        return len(unread)

    async def soft_delete_all(self, recipient_id: UserId) -> int:
        active = self._filtered(recipient_id, unread_only=False, type=None)
        for notification in active:
            self._notifications[notification.id] = notification.soft_delete()
        return len(active)

    async def purge_read_before(self, cutoff: datetime) -> int:
        stale = [
            n.id
            for n in self._notifications.values()
            if n.is_read and n.created_at < cutoff
        ]
        for notification_id in stale:
            del self._notifications[notification_id]
        return len(stale)
