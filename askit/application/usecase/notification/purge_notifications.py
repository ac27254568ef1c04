"""Purge old notifications use case."""

from pydantic import BaseModel, Field

from askit.config import NotificationSettings
from askit.domain.model import User
from askit.domain.service import NotificationService, PermissionService


class PurgeNotificationsRequest(BaseModel):
    """Purge request.

    ``actor`` is None when the purge runs as a background job.
    """

    actor: User | None = None
    days_old: int | None = Field(default=None, ge=1)


class PurgeNotificationsResponse(BaseModel):
    removed: int
    days_old: int


class PurgeNotificationsUseCase:
    """Use case for hard-deleting read notifications past the retention window."""

    def __init__(
        self,
        notification_service: NotificationService,
        permission_service: PermissionService,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize purge use case.

        Args:
            notification_service: Notification domain service
            permission_service: Permission domain service
            notification_settings: Default retention window
        """
        self.notification_service = notification_service
        self.permission_service = permission_service
        self.notification_settings = notification_settings

    async def execute(self, request: PurgeNotificationsRequest) -> PurgeNotificationsResponse:
        """Execute purge flow.

        Raises:
            ForbiddenError: If a requesting user is not an admin
        """
        if request.actor is not None:
            self.permission_service.require_admin(request.actor)

        days_old = request.days_old or self.notification_settings.purge_after_days
        removed = await self.notification_service.purge_read_older_than(days_old)
        return PurgeNotificationsResponse(removed=removed, days_old=days_old)
