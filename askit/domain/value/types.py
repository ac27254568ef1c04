"""Domain value objects for AskIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from askit.domain.value.common import RootValueObject, ValueObject


class VoteType(str, Enum):
    """Direction of a vote on a question or answer."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class Role(str, Enum):
    """User role."""

    USER = "user"
    ADMIN = "admin"


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    QUESTION_ANSWERED = "question_answered"
    ANSWER_VOTED = "answer_voted"
    QUESTION_VOTED = "question_voted"
    ANSWER_ACCEPTED = "answer_accepted"
    COMMENT_ADDED = "comment_added"
    USER_MENTIONED = "user_mentioned"
    ADMIN_ACTION = "admin_action"
    SYSTEM_MESSAGE = "system_message"


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Must be lowercase, alphanumeric with hyphens, 2-20 characters.
    Examples: 'python', 'unit-testing', 'es6'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9-]{2,20}$", v):
            raise ValueError(
                "Tag name must be 2-20 characters, lowercase, alphanumeric with hyphens"
            )
        return v

    @classmethod
    def normalize(cls, raw: str) -> "TagName":
        """Build a tag name from user input (trimmed and lowercased)."""
        return cls(raw.strip().lower())


class NotificationPayload(ValueObject):
    """References carried by a notification.

    All fields are optional; which ones are set depends on the notification type.
    """

    question_id: str | None = None
    answer_id: str | None = None
    comment_id: str | None = None
    user_id: str | None = None
    vote_type: VoteType | None = None
    action: str | None = None
