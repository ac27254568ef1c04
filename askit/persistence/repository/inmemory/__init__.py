"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .notification import InMemoryNotificationRepository
from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryNotificationRepository",
    "InMemoryQuestionRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
