"""Notification dispatch and inbox management."""

from abc import ABC, abstractmethod
from datetime import timedelta
from uuid import uuid4

import logfire

from askit.domain.error import NotFoundError, NotAuthorizedError
from askit.domain.model import Notification, User
from askit.domain.model.common import utcnow
from askit.domain.repository import NotificationRepository
from askit.domain.value import (
    NotificationId,
    NotificationPayload,
    NotificationType,
    UserId,
)

from .base import Service


class NotificationDispatcher(ABC):
    """Delivers notifications triggered by domain events.

    Called after the triggering mutation has been applied. A dispatcher must
    never raise: a lost notification is preferable to a failed vote or answer.
    """

    @abstractmethod
    async def notify(
        self,
        recipient_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        payload: NotificationPayload | None = None,
    ) -> Notification | None:
        """Deliver one notification.

        Returns:
            The stored notification, or None if delivery failed
        """
        pass


class RepositoryNotificationDispatcher(NotificationDispatcher):
    """Dispatcher that stores notifications through the repository."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        self.notification_repository = notification_repository

    async def notify(
        self,
        recipient_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        payload: NotificationPayload | None = None,
    ) -> Notification | None:
        with logfire.span(
            "notification_dispatcher.notify",
            recipient_id=str(recipient_id),
            type=type.value,
        ):
            try:
                notification = Notification(
                    id=NotificationId(uuid4()),
                    recipient_id=recipient_id,
                    type=type,
                    title=title[:200],
                    message=message[:1000],
                    payload=payload or NotificationPayload(),
                )
                saved = await self.notification_repository.save(notification)
            except Exception as e:
                # Delivery failures must not undo the mutation that triggered them
                logfire.error(
                    "Notification delivery failed",
                    recipient_id=str(recipient_id),
                    type=type.value,
                    error=str(e),
                    error_type=e.__class__.__name__,
                )
                return None

            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                recipient_id=str(recipient_id),
                type=type.value,
            )
            return saved


class NotificationService(Service):
    """Domain service for a user's notification inbox."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        unread_only: bool = False,
        type: NotificationType | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Notification], int]:
        """List a recipient's notifications, newest first.

        Returns:
            The page of notifications and the total matching count
        """
        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_for_recipient(
                recipient_id,
                unread_only=unread_only,
                type=type,
                limit=limit,
                offset=offset,
            )
            total = await self.notification_repository.count_for_recipient(
                recipient_id, unread_only=unread_only, type=type
            )
            return notifications, total

    async def _get_owned(
        self, notification_id: NotificationId, user: User
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        if not notification.is_owned_by(user.id):
            logfire.warn(
                "Notification access by non-owner",
                notification_id=str(notification_id),
                user_id=str(user.id),
            )
            raise NotAuthorizedError("notification", str(notification_id), str(user.id))
        return notification

    async def mark_read(self, notification_id: NotificationId, user: User) -> Notification:
        """Mark one of the user's notifications as read."""
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, user)
            if notification.is_read:
                return notification
            return await self.notification_repository.save(notification.mark_read())

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every unread notification of the user as read in one update."""
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            changed = await self.notification_repository.mark_all_read(
                user_id, utcnow()
            )
            logfire.info("Notifications marked read", user_id=str(user_id), count=changed)
            return changed

    async def unread_count(self, user_id: UserId) -> int:
        return await self.notification_repository.count_for_recipient(
            user_id, unread_only=True
        )

    async def delete(self, notification_id: NotificationId, user: User) -> None:
        """Soft-delete one of the user's notifications."""
        with logfire.span(
            "notification_service.delete", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, user)
            await self.notification_repository.save(notification.soft_delete())

    async def delete_all(self, user_id: UserId) -> int:
        with logfire.span("notification_service.delete_all", user_id=str(user_id)):
            return await self.notification_repository.soft_delete_all(user_id)

    async def purge_read_older_than(self, days_old: int) -> int:
        """Hard-delete read notifications created more than ``days_old`` days ago.

        Returns:
            Number of notifications removed
        """
        with logfire.span("notification_service.purge", days_old=days_old):
            cutoff = utcnow() - timedelta(days=days_old)
            removed = await self.notification_repository.purge_read_before(cutoff)
            logfire.info("Old notifications purged", days_old=days_old, count=removed)
            return removed
