"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from askit.domain.model.notification import Notification
from askit.domain.value import NotificationId, NotificationType, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Soft-deleted notifications are excluded from every read.
    """

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """List a recipient's notifications, newest first.

        Args:
            recipient_id: Owner of the notifications
            unread_only: Only unread notifications
            type: Only notifications of this type
            limit: Maximum number to return
            offset: Number to skip

        Returns:
            Matching notifications
        """
        pass

    @abstractmethod
    async def count_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: Optional[NotificationType] = None,
    ) -> int:
        """Count a recipient's notifications with the same filters as the listing."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a notification (create or update).

        Creation runs inside a savepoint so a failure never poisons the
        surrounding transaction.
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId, read_at: datetime) -> int:
        """Mark every unread notification of a recipient as read.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def soft_delete_all(self, recipient_id: UserId) -> int:
        """Soft-delete every notification of a recipient.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def purge_read_before(self, cutoff: datetime) -> int:
        """Hard-delete read notifications created before ``cutoff``.

        Returns:
            Number of notifications removed
        """
        pass
