"""Application layer DI providers."""

from dishka import Scope, provide

from askit.application.assembly import ViewAssembler
from askit.application.usecase.answer import (
    AcceptAnswerUseCase,
    AddCommentUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    RemoveCommentUseCase,
    UpdateAnswerUseCase,
    VoteAnswerUseCase,
)
from askit.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    UpdateProfileUseCase,
)
from askit.application.usecase.notification import (
    DeleteAllNotificationsUseCase,
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    PurgeNotificationsUseCase,
    UnreadCountUseCase,
)
from askit.application.usecase.question import (
    CloseQuestionUseCase,
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
    VoteQuestionUseCase,
)
from askit.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    PopularTagsUseCase,
    SearchTagsUseCase,
    SetTagOfficialUseCase,
    UpdateTagUseCase,
)
from askit.application.usecase.user import (
    BanUserUseCase,
    ChangeRoleUseCase,
    DeleteUserUseCase,
    GetUserProfileUseCase,
    GetUserStatsUseCase,
    ListUsersUseCase,
)
from askit.domain.repository import TagRepository, UserRepository
from askit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Use cases are wired from their constructor signatures.
    """

    scope = Scope.REQUEST

    @provide
    def get_view_assembler(
        self, user_repository: UserRepository, tag_repository: TagRepository
    ) -> ViewAssembler:
        """Provide read-side view assembler."""
        return ViewAssembler(
            user_repository=user_repository, tag_repository=tag_repository
        )

    # Auth use cases
    register = provide(RegisterUseCase)
    login = provide(LoginUseCase)
    get_current_user = provide(GetCurrentUserUseCase)
    update_profile = provide(UpdateProfileUseCase)
    change_password = provide(ChangePasswordUseCase)

    # Question use cases
    list_questions = provide(ListQuestionsUseCase)
    get_question = provide(GetQuestionUseCase)
    create_question = provide(CreateQuestionUseCase)
    update_question = provide(UpdateQuestionUseCase)
    delete_question = provide(DeleteQuestionUseCase)
    vote_question = provide(VoteQuestionUseCase)
    close_question = provide(CloseQuestionUseCase)

    # Answer use cases
    list_answers = provide(ListAnswersUseCase)
    create_answer = provide(CreateAnswerUseCase)
    update_answer = provide(UpdateAnswerUseCase)
    delete_answer = provide(DeleteAnswerUseCase)
    vote_answer = provide(VoteAnswerUseCase)
    accept_answer = provide(AcceptAnswerUseCase)
    add_comment = provide(AddCommentUseCase)
    remove_comment = provide(RemoveCommentUseCase)

    # Tag use cases
    list_tags = provide(ListTagsUseCase)
    get_tag = provide(GetTagUseCase)
    create_tag = provide(CreateTagUseCase)
    update_tag = provide(UpdateTagUseCase)
    delete_tag = provide(DeleteTagUseCase)
    popular_tags = provide(PopularTagsUseCase)
    search_tags = provide(SearchTagsUseCase)
    set_tag_official = provide(SetTagOfficialUseCase)

    # Notification use cases
    list_notifications = provide(ListNotificationsUseCase)
    mark_notification_read = provide(MarkNotificationReadUseCase)
    mark_all_notifications_read = provide(MarkAllNotificationsReadUseCase)
    unread_count = provide(UnreadCountUseCase)
    delete_notification = provide(DeleteNotificationUseCase)
    delete_all_notifications = provide(DeleteAllNotificationsUseCase)
    purge_notifications = provide(PurgeNotificationsUseCase)

    # User use cases
    get_user_profile = provide(GetUserProfileUseCase)
    get_user_stats = provide(GetUserStatsUseCase)
    list_users = provide(ListUsersUseCase)
    ban_user = provide(BanUserUseCase)
    change_role = provide(ChangeRoleUseCase)
    delete_user = provide(DeleteUserUseCase)
