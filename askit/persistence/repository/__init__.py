"""PostgreSQL repository implementations."""

from askit.persistence.repository.answer import PostgresAnswerRepository
from askit.persistence.repository.notification import PostgresNotificationRepository
from askit.persistence.repository.question import PostgresQuestionRepository
from askit.persistence.repository.tag import PostgresTagRepository
from askit.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresNotificationRepository",
    "PostgresQuestionRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]
