"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .get_tag import GetTagRequest, GetTagResponse, GetTagUseCase
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .popular_tags import (
    PopularTagsRequest,
    PopularTagsUseCase,
    SearchTagsRequest,
    SearchTagsUseCase,
    TagListResponse,
)
from .set_official import SetTagOfficialRequest, SetTagOfficialUseCase
from .update_tag import UpdateTagRequest, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "GetTagRequest",
    "GetTagResponse",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "PopularTagsRequest",
    "PopularTagsUseCase",
    "SearchTagsRequest",
    "SearchTagsUseCase",
    "SetTagOfficialRequest",
    "SetTagOfficialUseCase",
    "TagListResponse",
    "UpdateTagRequest",
    "UpdateTagUseCase",
]
