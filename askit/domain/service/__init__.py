"""Domain services."""

from .acceptance_service import AcceptanceResult, AcceptanceService
from .answer_service import AnswerService
from .auth_service import AuthResult, AuthService
from .base import Service
from .jwt_service import JWTService
from .notification_service import (
    NotificationDispatcher,
    NotificationService,
    RepositoryNotificationDispatcher,
)
from .permission_service import PermissionService
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService, UserStats
from .vote_service import VoteResult, VoteService

__all__ = [
    "AcceptanceResult",
    "AcceptanceService",
    "AnswerService",
    "AuthResult",
    "AuthService",
    "JWTService",
    "NotificationDispatcher",
    "NotificationService",
    "PermissionService",
    "QuestionService",
    "RepositoryNotificationDispatcher",
    "Service",
    "TagService",
    "UserService",
    "UserStats",
    "VoteResult",
    "VoteService",
]
