"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from askit.application.assembly import AnswerView, ViewAssembler
from askit.domain.model import User
from askit.domain.service import AnswerService, PermissionService, QuestionService
from askit.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    actor: User
    question_id: str
    content: str = Field(min_length=10, max_length=10000)


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        permission_service: PermissionService,
        assembler: ViewAssembler,
    ) -> None:
        """Initialize create answer use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            permission_service: Permission domain service
            assembler: View assembler
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.permission_service = permission_service
        self.assembler = assembler

    async def execute(self, request: CreateAnswerRequest) -> AnswerView:
        """Execute create answer flow.

        Raises:
            ForbiddenError: If the author is banned
            NotFoundError: If the question doesn't exist or is deleted
            BusinessRuleViolationError: If the question is closed or already
                answered by this user
        """
        self.permission_service.ensure_active(request.actor)
        question = await self.question_service.get(
            QuestionId(UUID(request.question_id))
        )
        answer = await self.answer_service.create(
            question, request.actor, request.content
        )
        return await self.assembler.answer(answer, request.actor.id)
