"""Update tag use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from askit.application.assembly import TagView
from askit.domain.model import User
from askit.domain.service import PermissionService, TagService
from askit.domain.value import TagId


class UpdateTagRequest(BaseModel):
    """Update tag request. Unset fields are left unchanged."""

    actor: User
    tag_id: str
    description: str | None = Field(default=None, max_length=500)
    color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")


class UpdateTagUseCase:
    """Use case for editing a tag's description or color."""

    def __init__(
        self, tag_service: TagService, permission_service: PermissionService
    ) -> None:
        self.tag_service = tag_service
        self.permission_service = permission_service

    async def execute(self, request: UpdateTagRequest) -> TagView:
        tag = await self.tag_service.get(TagId(UUID(request.tag_id)))
        self.permission_service.require_owner_or_admin(
            request.actor, tag.created_by, "tag", request.tag_id
        )
        updated = await self.tag_service.update(
            tag, description=request.description, color=request.color
        )
        return TagView.from_tag(updated)
