"""List notifications use case."""

from pydantic import BaseModel, Field

from askit.application.assembly import NotificationView, Pagination, page_offset
from askit.config import PaginationSettings
from askit.domain.model import User
from askit.domain.service import NotificationService
from askit.domain.value import NotificationType


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    actor: User
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    unread_only: bool = False
    type: NotificationType | None = None


class ListNotificationsResponse(BaseModel):
    notifications: list[NotificationView]
    unread_count: int
    pagination: Pagination


class ListNotificationsUseCase:
    """Use case for reading the authenticated user's inbox, newest first."""

    def __init__(
        self,
        notification_service: NotificationService,
        pagination: PaginationSettings,
    ) -> None:
        self.notification_service = notification_service
        self.pagination = pagination

    async def execute(self, request: ListNotificationsRequest) -> ListNotificationsResponse:
        limit = self.pagination.page_size(request.limit)
        notifications, total = await self.notification_service.list_for_recipient(
            request.actor.id,
            unread_only=request.unread_only,
            type=request.type,
            limit=limit,
            offset=page_offset(request.page, limit),
        )
        unread = await self.notification_service.unread_count(request.actor.id)
        return ListNotificationsResponse(
            notifications=[NotificationView.from_notification(n) for n in notifications],
            unread_count=unread,
            pagination=Pagination.build(request.page, limit, total),
        )
