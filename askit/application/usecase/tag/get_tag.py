"""Get tag use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import QuestionView, TagView, ViewAssembler
from askit.domain.repository import QuestionFilter, QuestionSortOrder
from askit.domain.service import QuestionService, TagService
from askit.domain.value import TagId

RECENT_QUESTIONS_LIMIT = 10


class GetTagRequest(BaseModel):
    """Get tag request."""

    tag_id: str


class GetTagResponse(BaseModel):
    """Tag with its most recently active questions."""

    tag: TagView
    recent_questions: list[QuestionView]


class GetTagUseCase:
    """Use case for reading a tag."""

    def __init__(
        self,
        tag_service: TagService,
        question_service: QuestionService,
        assembler: ViewAssembler,
    ) -> None:
        self.tag_service = tag_service
        self.question_service = question_service
        self.assembler = assembler

    async def execute(self, request: GetTagRequest) -> GetTagResponse:
        """Execute get tag flow.

        Raises:
            NotFoundError: If the tag doesn't exist or is deleted
        """
        tag = await self.tag_service.get(TagId(UUID(request.tag_id)))
        questions, _ = await self.question_service.list_questions(
            filters=QuestionFilter(tag_id=tag.id),
            sort=QuestionSortOrder.ACTIVITY,
            limit=RECENT_QUESTIONS_LIMIT,
        )
        return GetTagResponse(
            tag=TagView.from_tag(tag),
            recent_questions=await self.assembler.questions(questions),
        )
