"""Popular and search tags use cases."""

from pydantic import BaseModel, Field

from askit.application.assembly import TagView
from askit.domain.service import TagService


class PopularTagsRequest(BaseModel):
    limit: int = Field(default=10, ge=1, le=50)


class SearchTagsRequest(BaseModel):
    q: str = Field(min_length=1)
    limit: int = Field(default=10, ge=1, le=50)


class TagListResponse(BaseModel):
    tags: list[TagView]


class PopularTagsUseCase:
    """Use case for the most used tags."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: PopularTagsRequest) -> TagListResponse:
        tags = await self.tag_service.popular(limit=request.limit)
        return TagListResponse(tags=[TagView.from_tag(tag) for tag in tags])


class SearchTagsUseCase:
    """Use case for tag autocompletion."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: SearchTagsRequest) -> TagListResponse:
        tags = await self.tag_service.search(request.q, limit=request.limit)
        return TagListResponse(tags=[TagView.from_tag(tag) for tag in tags])
