"""Domain models for AskIt."""

from askit.domain.model.answer import Answer, Comment
from askit.domain.model.notification import Notification
from askit.domain.model.question import Question
from askit.domain.model.tag import Tag
from askit.domain.model.user import User

__all__ = [
    "Answer",
    "Comment",
    "Notification",
    "Question",
    "Tag",
    "User",
]
