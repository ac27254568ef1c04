"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from askit.domain.model import Answer, Notification, Question, Tag, User
from askit.domain.value import AnswerId, NotificationId, QuestionId, TagId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    One store outlives the request-scoped repositories built on top of it,
    so state written in one request is visible in the next.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    questions: dict[QuestionId, Question] = field(default_factory=dict)
    answers: dict[AnswerId, Answer] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
