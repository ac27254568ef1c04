"""Get user profile use case."""

from pydantic import BaseModel

from askit.application.assembly import (
    AnswerView,
    PublicUserView,
    QuestionView,
    ViewAssembler,
)
from askit.domain.repository import AnswerRepository, QuestionFilter, QuestionSortOrder
from askit.domain.service import QuestionService, UserService, UserStats

RECENT_ACTIVITY_LIMIT = 5


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str


class GetUserProfileResponse(BaseModel):
    """Public profile with recent activity."""

    user: PublicUserView
    question_count: int
    answer_count: int
    accepted_answer_count: int
    total_votes: int
    recent_questions: list[QuestionView]
    recent_answers: list[AnswerView]


class GetUserProfileUseCase:
    """Use case for viewing a user's public profile."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_repository: AnswerRepository,
        assembler: ViewAssembler,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_repository: Answer repository
            assembler: View assembler
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_repository = answer_repository
        self.assembler = assembler

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If no active user has this username
        """
        user = await self.user_service.get_by_username(request.username)
        stats: UserStats = await self.user_service.get_stats(user.id)

        questions, _ = await self.question_service.list_questions(
            filters=QuestionFilter(author_id=user.id),
            sort=QuestionSortOrder.NEWEST,
            limit=RECENT_ACTIVITY_LIMIT,
        )
        answers = await self.answer_repository.find_by_author(
            user.id, limit=RECENT_ACTIVITY_LIMIT
        )

        return GetUserProfileResponse(
            user=PublicUserView.from_user(user),
            question_count=stats.question_count,
            answer_count=stats.answer_count,
            accepted_answer_count=stats.accepted_answer_count,
            total_votes=stats.total_votes,
            recent_questions=await self.assembler.questions(questions),
            recent_answers=await self.assembler.answers(answers),
        )
