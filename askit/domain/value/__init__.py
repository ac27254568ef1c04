"""Domain value objects for AskIt."""

from askit.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    TagId,
    UserId,
)
from askit.domain.value.types import (
    NotificationPayload,
    NotificationType,
    Role,
    TagName,
    VoteType,
)
from askit.domain.value.vote_set import VoteSet

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "TagId",
    "NotificationId",
    # Types
    "TagName",
    "VoteType",
    "Role",
    "NotificationType",
    "NotificationPayload",
    "VoteSet",
]
