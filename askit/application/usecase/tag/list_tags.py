"""List tags use case."""

import logfire
from pydantic import BaseModel, Field

from askit.application.assembly import Pagination, TagView, page_offset
from askit.config import PaginationSettings
from askit.domain.repository import TagSortOrder
from askit.domain.service import TagService


class ListTagsRequest(BaseModel):
    """List tags request."""

    page: int = Field(default=1, ge=1)
    limit: int | None = Field(default=None, ge=1)
    sort: TagSortOrder = TagSortOrder.POPULAR
    search: str | None = None


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagView]
    pagination: Pagination


class ListTagsUseCase:
    """Use case for listing tags with filtering and pagination."""

    def __init__(self, tag_service: TagService, pagination: PaginationSettings) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            pagination: Paging limits
        """
        self.tag_service = tag_service
        self.pagination = pagination

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        limit = self.pagination.page_size(request.limit)
        with logfire.span(
            "list_tags.execute", sort=request.sort.value, page=request.page, limit=limit
        ):
            tags, total = await self.tag_service.list_tags(
                sort=request.sort,
                search=request.search.strip().lower() if request.search else None,
                limit=limit,
                offset=page_offset(request.page, limit),
            )
            logfire.info("Tags listed", count=len(tags), total=total)
            return ListTagsResponse(
                tags=[TagView.from_tag(tag) for tag in tags],
                pagination=Pagination.build(request.page, limit, total),
            )
