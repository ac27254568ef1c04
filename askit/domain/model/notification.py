"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from askit.domain.model.common import DomainModel, utcnow
from askit.domain.value import (
    NotificationId,
    NotificationPayload,
    NotificationType,
    UserId,
)


class Notification(DomainModel):
    """Notification delivered to a single recipient.

    Notifications are soft-deleted by their owner; only read notifications
    past the retention window are ever hard-deleted.
    """

    id: NotificationId
    recipient_id: UserId
    type: NotificationType
    title: str = Field(min_length=1, max_length=200)
    message: str = Field(min_length=1, max_length=1000)
    payload: NotificationPayload = Field(default_factory=NotificationPayload)
    is_read: bool = False
    read_at: Optional[datetime] = None
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def url(self) -> str | None:
        """Client route for the thing the notification is about."""
        question_id = self.payload.question_id
        if self.type in (
            NotificationType.QUESTION_ANSWERED,
            NotificationType.QUESTION_VOTED,
            NotificationType.COMMENT_ADDED,
        ):
            return f"/questions/{question_id}" if question_id else None
        if self.type in (
            NotificationType.ANSWER_VOTED,
            NotificationType.ANSWER_ACCEPTED,
        ):
            if not question_id:
                return None
            return f"/questions/{question_id}#answer-{self.payload.answer_id}"
        if self.type == NotificationType.USER_MENTIONED and self.payload.user_id:
            return f"/users/{self.payload.user_id}"
        return None

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.recipient_id == user_id

    def mark_read(self, now: datetime | None = None) -> "Notification":
        if self.is_read:
            return self
        return self.model_copy(update={"is_read": True, "read_at": now or utcnow()})

    def soft_delete(self) -> "Notification":
        return self.model_copy(update={"is_deleted": True})
