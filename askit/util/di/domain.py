"""Domain layer DI providers."""

from dishka import Scope, provide

from askit.config import AuthSettings, ReputationSettings
from askit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from askit.domain.service import (
    AcceptanceService,
    AnswerService,
    AuthService,
    JWTService,
    NotificationDispatcher,
    NotificationService,
    PermissionService,
    QuestionService,
    RepositoryNotificationDispatcher,
    TagService,
    UserService,
    VoteService,
)
from askit.util.di.base import ProviderBase
from askit.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        password_hasher: PasswordHasher,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            jwt_service=jwt_service,
            password_hasher=password_hasher,
            auth_settings=auth_settings,
        )

    @provide
    def get_permission_service(self, reputation: ReputationSettings) -> PermissionService:
        """Provide permission domain service."""
        return PermissionService(reputation=reputation)

    @provide
    def get_notification_dispatcher(
        self, notification_repository: NotificationRepository
    ) -> NotificationDispatcher:
        """Provide notification dispatcher backed by the repository."""
        return RepositoryNotificationDispatcher(
            notification_repository=notification_repository
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification inbox domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, question_repository: QuestionRepository
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository, question_repository=question_repository
        )

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        dispatcher: NotificationDispatcher,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            dispatcher=dispatcher,
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        dispatcher: NotificationDispatcher,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            dispatcher=dispatcher,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        dispatcher: NotificationDispatcher,
    ) -> AcceptanceService:
        """Provide accepted-answer domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            dispatcher=dispatcher,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )
