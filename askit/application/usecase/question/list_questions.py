"""List questions use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from askit.application.assembly import Pagination, QuestionView, ViewAssembler, page_offset
from askit.config import PaginationSettings
from askit.domain.repository import (
    QuestionFilter,
    QuestionSortOrder,
    TagRepository,
    UserRepository,
)
from askit.domain.service import QuestionService, TagService
from askit.domain.value import UserId


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tag: str | None = None  # Tag name
    search: str | None = None
    author: str | None = None  # Username
    answered: bool | None = None
    viewer_id: str | None = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionView]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing and searching questions."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_repository: UserRepository,
        assembler: ViewAssembler,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service, to resolve the tag filter
            user_repository: User repository, to resolve the author filter
            assembler: View assembler
            pagination: Paging limits
        """
        self.question_service = question_service
        self.tag_service = tag_service
        self.user_repository = user_repository
        self.assembler = assembler
        self.pagination = pagination

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        An unknown tag or author matches nothing rather than failing.
        """
        limit = self.pagination.page_size(request.limit)
        empty = ListQuestionsResponse(
            questions=[], pagination=Pagination.build(request.page, limit, 0)
        )

        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            tag=request.tag,
            page=request.page,
            limit=limit,
        ):
            filters = QuestionFilter(
                search=request.search.strip() if request.search else None,
                answered=request.answered,
            )

            if request.tag:
                tag = await self.tag_service.get_by_name(request.tag)
                if not tag:
                    return empty
                filters.tag_id = tag.id

            if request.author:
                author = await self.user_repository.find_by_username(request.author)
                if not author:
                    return empty
                filters.author_id = author.id

            questions, total = await self.question_service.list_questions(
                filters=filters,
                sort=request.sort,
                limit=limit,
                offset=page_offset(request.page, limit),
            )

            viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
            return ListQuestionsResponse(
                questions=await self.assembler.questions(questions, viewer_id),
                pagination=Pagination.build(request.page, limit, total),
            )
