"""Notification inbox use cases: read state, counts and deletion."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import NotificationView
from askit.domain.model import User
from askit.domain.service import NotificationService
from askit.domain.value import NotificationId


class NotificationRequest(BaseModel):
    """Request naming one of the actor's notifications."""

    actor: User
    notification_id: str


class InboxRequest(BaseModel):
    """Request acting on the actor's whole inbox."""

    actor: User


class CountResponse(BaseModel):
    count: int


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> NotificationView:
        """Execute mark read flow.

        Raises:
            NotFoundError: If the notification doesn't exist or is deleted
            NotAuthorizedError: If the notification belongs to someone else
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)), request.actor
        )
        return NotificationView.from_notification(notification)


class MarkAllNotificationsReadUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: InboxRequest) -> CountResponse:
        count = await self.notification_service.mark_all_read(request.actor.id)
        return CountResponse(count=count)


class UnreadCountUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: InboxRequest) -> CountResponse:
        count = await self.notification_service.unread_count(request.actor.id)
        return CountResponse(count=count)


class DeleteNotificationUseCase:
    """Use case for soft-deleting one notification."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> None:
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)), request.actor
        )


class DeleteAllNotificationsUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: InboxRequest) -> CountResponse:
        count = await self.notification_service.delete_all(request.actor.id)
        return CountResponse(count=count)
