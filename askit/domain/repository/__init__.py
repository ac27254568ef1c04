"""Repository interfaces for AskIt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from askit.domain.repository.answer import AnswerRepository, AnswerSortOrder
from askit.domain.repository.notification import NotificationRepository
from askit.domain.repository.question import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)
from askit.domain.repository.tag import TagRepository, TagSortOrder
from askit.domain.repository.user import UserRepository, UserSortOrder

__all__ = [
    "AnswerRepository",
    "AnswerSortOrder",
    "NotificationRepository",
    "QuestionFilter",
    "QuestionRepository",
    "QuestionSortOrder",
    "TagRepository",
    "TagSortOrder",
    "UserRepository",
    "UserSortOrder",
]
