"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .manage_notifications import (
    CountResponse,
    DeleteAllNotificationsUseCase,
    DeleteNotificationUseCase,
    InboxRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
    UnreadCountUseCase,
)
from .purge_notifications import (
    PurgeNotificationsRequest,
    PurgeNotificationsResponse,
    PurgeNotificationsUseCase,
)

__all__ = [
    "CountResponse",
    "DeleteAllNotificationsUseCase",
    "DeleteNotificationUseCase",
    "InboxRequest",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadUseCase",
    "NotificationRequest",
    "PurgeNotificationsRequest",
    "PurgeNotificationsResponse",
    "PurgeNotificationsUseCase",
    "UnreadCountUseCase",
]
