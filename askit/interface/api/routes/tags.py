"""Tag routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import AliasChoices, BaseModel, Field

from askit.application.assembly import TagView
from askit.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    GetTagRequest,
    GetTagResponse,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    PopularTagsRequest,
    PopularTagsUseCase,
    SearchTagsRequest,
    SearchTagsUseCase,
    SetTagOfficialRequest,
    SetTagOfficialUseCase,
    TagListResponse,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from askit.domain.repository.tag import TagSortOrder
from askit.domain.service import AuthService
from askit.interface.api.envelope import ApiResponse, ok
from askit.interface.api.security import require_user

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class CreateTagAPIRequest(BaseModel):
    name: str = Field(min_length=2, max_length=20)
    description: str | None = Field(default=None, max_length=500)
    color: str | None = Field(default=None, pattern=HEX_COLOR)


class UpdateTagAPIRequest(BaseModel):
    description: str | None = Field(default=None, max_length=500)
    color: str | None = Field(default=None, pattern=HEX_COLOR)


class SetOfficialAPIRequest(BaseModel):
    is_official: bool = Field(
        default=True, validation_alias=AliasChoices("is_official", "isOfficial")
    )


@router.get("", response_model=ApiResponse[ListTagsResponse])
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: TagSortOrder = TagSortOrder.POPULAR,
    search: str | None = None,
) -> ApiResponse[ListTagsResponse]:
    result = await use_case.execute(
        ListTagsRequest(page=page, limit=limit, sort=sort, search=search)
    )
    return ok(result)


# Registered before /{tag_id} so the literal paths win
@router.get("/popular", response_model=ApiResponse[TagListResponse])
async def popular_tags(
    use_case: FromDishka[PopularTagsUseCase],
    limit: int = Query(default=10, ge=1, le=50),
) -> ApiResponse[TagListResponse]:
    return ok(await use_case.execute(PopularTagsRequest(limit=limit)))


@router.get("/search", response_model=ApiResponse[TagListResponse])
async def search_tags(
    use_case: FromDishka[SearchTagsUseCase],
    q: str = Query(min_length=1),
    limit: int = Query(default=10, ge=1, le=50),
) -> ApiResponse[TagListResponse]:
    """Tags whose name starts with ``q``, for autocompletion."""
    return ok(await use_case.execute(SearchTagsRequest(q=q, limit=limit)))


@router.get("/{tag_id}", response_model=ApiResponse[GetTagResponse])
async def get_tag(
    tag_id: UUID,
    use_case: FromDishka[GetTagUseCase],
) -> ApiResponse[GetTagResponse]:
    """Tag details with its most recently active questions."""
    return ok(await use_case.execute(GetTagRequest(tag_id=str(tag_id))))


@router.post(
    "",
    response_model=ApiResponse[TagView],
    status_code=status.HTTP_201_CREATED,
)
async def create_tag(
    body: CreateTagAPIRequest,
    request: Request,
    use_case: FromDishka[CreateTagUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[TagView]:
    """Create a tag. Requires enough reputation."""
    actor = await require_user(request, auth_service)
    tag = await use_case.execute(
        CreateTagRequest(
            actor=actor, name=body.name, description=body.description, color=body.color
        )
    )
    return ok(tag, "Tag created successfully")


@router.put("/{tag_id}", response_model=ApiResponse[TagView])
async def update_tag(
    tag_id: UUID,
    body: UpdateTagAPIRequest,
    request: Request,
    use_case: FromDishka[UpdateTagUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[TagView]:
    actor = await require_user(request, auth_service)
    tag = await use_case.execute(
        UpdateTagRequest(
            actor=actor, tag_id=str(tag_id), description=body.description, color=body.color
        )
    )
    return ok(tag, "Tag updated successfully")


@router.delete("/{tag_id}", response_model=ApiResponse[None])
async def delete_tag(
    tag_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteTagUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[None]:
    """Delete a tag no question uses. Tag creator or admin."""
    actor = await require_user(request, auth_service)
    await use_case.execute(DeleteTagRequest(actor=actor, tag_id=str(tag_id)))
    return ok(message="Tag deleted successfully")


@router.put("/{tag_id}/official", response_model=ApiResponse[TagView])
async def set_official(
    tag_id: UUID,
    request: Request,
    use_case: FromDishka[SetTagOfficialUseCase],
    auth_service: FromDishka[AuthService],
    body: SetOfficialAPIRequest | None = None,
) -> ApiResponse[TagView]:
    """Mark a tag official (or not). Admin only."""
    actor = await require_user(request, auth_service)
    is_official = body.is_official if body else True
    tag = await use_case.execute(
        SetTagOfficialRequest(actor=actor, tag_id=str(tag_id), is_official=is_official)
    )
    return ok(tag, "Tag status updated")
