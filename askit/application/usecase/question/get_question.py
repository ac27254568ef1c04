"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import AnswerView, QuestionView, ViewAssembler
from askit.domain.repository import AnswerSortOrder
from askit.domain.service import AnswerService, QuestionService
from askit.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Question with all of its answers."""

    question: QuestionView
    answers: list[AnswerView]


class GetQuestionUseCase:
    """Use case for reading a question thread.

    Each read counts as a view.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        assembler: ViewAssembler,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.assembler = assembler

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question doesn't exist or is deleted
        """
        question_id = QuestionId(UUID(request.question_id))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        question = await self.question_service.view(question_id)
        answers, _ = await self.answer_service.list_for_question(
            question_id, sort=AnswerSortOrder.VOTES
        )

        return GetQuestionResponse(
            question=await self.assembler.question(question, viewer_id),
            answers=await self.assembler.answers(answers, viewer_id),
        )
