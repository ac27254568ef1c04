"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from askit.application.assembly import AnswerView, Pagination, ViewAssembler, page_offset
from askit.config import PaginationSettings
from askit.domain.repository import AnswerSortOrder
from askit.domain.service import AnswerService, QuestionService
from askit.domain.value import QuestionId, UserId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: AnswerSortOrder = AnswerSortOrder.VOTES
    viewer_id: str | None = None


class ListAnswersResponse(BaseModel):
    answers: list[AnswerView]
    pagination: Pagination


class ListAnswersUseCase:
    """Use case for paging through the answers of a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        assembler: ViewAssembler,
        pagination: PaginationSettings,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.assembler = assembler
        self.pagination = pagination

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question doesn't exist or is deleted
        """
        question = await self.question_service.get(
            QuestionId(UUID(request.question_id))
        )
        limit = self.pagination.page_size(request.limit)
        answers, total = await self.answer_service.list_for_question(
            question.id,
            sort=request.sort,
            limit=limit,
            offset=page_offset(request.page, limit),
        )

        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        return ListAnswersResponse(
            answers=await self.assembler.answers(answers, viewer_id),
            pagination=Pagination.build(request.page, limit, total),
        )
