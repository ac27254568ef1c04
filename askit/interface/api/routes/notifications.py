"""Notification routes. Every endpoint acts on the caller's own inbox."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from askit.application.assembly import NotificationView
from askit.application.usecase.notification import (
    CountResponse,
    DeleteAllNotificationsUseCase,
    DeleteNotificationUseCase,
    InboxRequest,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
    PurgeNotificationsRequest,
    PurgeNotificationsResponse,
    PurgeNotificationsUseCase,
    UnreadCountUseCase,
)
from askit.domain.service import AuthService
from askit.domain.value import NotificationType
from askit.interface.api.envelope import ApiResponse, ok
from askit.interface.api.security import require_user

router = APIRouter(prefix="/notifications", tags=["notifications"], route_class=DishkaRoute)


@router.get("", response_model=ApiResponse[ListNotificationsResponse])
async def list_notifications(
    request: Request,
    use_case: FromDishka[ListNotificationsUseCase],
    auth_service: FromDishka[AuthService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    unread_only: bool = False,
    unread_only_camel: bool | None = Query(default=None, alias="unreadOnly"),
    type: NotificationType | None = None,
) -> ApiResponse[ListNotificationsResponse]:
    """Newest first, with the unread count alongside.

    The unread filter is accepted as ``unread_only`` or ``unreadOnly``.
    """
    actor = await require_user(request, auth_service)
    if unread_only_camel is not None:
        unread_only = unread_only_camel
    result = await use_case.execute(
        ListNotificationsRequest(
            actor=actor, page=page, limit=limit, unread_only=unread_only, type=type
        )
    )
    return ok(result)


@router.get("/unread-count", response_model=ApiResponse[CountResponse])
async def unread_count(
    request: Request,
    use_case: FromDishka[UnreadCountUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[CountResponse]:
    actor = await require_user(request, auth_service)
    return ok(await use_case.execute(InboxRequest(actor=actor)))


@router.put("/read-all", response_model=ApiResponse[CountResponse])
async def mark_all_read(
    request: Request,
    use_case: FromDishka[MarkAllNotificationsReadUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[CountResponse]:
    actor = await require_user(request, auth_service)
    result = await use_case.execute(InboxRequest(actor=actor))
    return ok(result, "All notifications marked as read")


# Must precede DELETE /{notification_id}
@router.delete("/purge", response_model=ApiResponse[PurgeNotificationsResponse])
async def purge_notifications(
    request: Request,
    use_case: FromDishka[PurgeNotificationsUseCase],
    auth_service: FromDishka[AuthService],
    days_old: int | None = Query(default=None, ge=1),
) -> ApiResponse[PurgeNotificationsResponse]:
    """Hard-delete read notifications older than ``days_old``. Admin only."""
    actor = await require_user(request, auth_service)
    result = await use_case.execute(PurgeNotificationsRequest(actor=actor, days_old=days_old))
    return ok(result, f"Purged {result.removed} notifications")


@router.put("/{notification_id}/read", response_model=ApiResponse[NotificationView])
async def mark_read(
    notification_id: UUID,
    request: Request,
    use_case: FromDishka[MarkNotificationReadUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[NotificationView]:
    actor = await require_user(request, auth_service)
    notification = await use_case.execute(
        NotificationRequest(actor=actor, notification_id=str(notification_id))
    )
    return ok(notification, "Notification marked as read")


@router.delete("/{notification_id}", response_model=ApiResponse[None])
async def delete_notification(
    notification_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteNotificationUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[None]:
    actor = await require_user(request, auth_service)
    await use_case.execute(
        NotificationRequest(actor=actor, notification_id=str(notification_id))
    )
    return ok(message="Notification deleted")


@router.delete("", response_model=ApiResponse[CountResponse])
async def delete_all_notifications(
    request: Request,
    use_case: FromDishka[DeleteAllNotificationsUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[CountResponse]:
    actor = await require_user(request, auth_service)
    result = await use_case.execute(InboxRequest(actor=actor))
    return ok(result, "All notifications deleted")
