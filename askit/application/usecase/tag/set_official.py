"""Mark tag official use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import TagView
from askit.domain.model import User
from askit.domain.service import PermissionService, TagService
from askit.domain.value import TagId


class SetTagOfficialRequest(BaseModel):
    """Set tag official request."""

    actor: User
    tag_id: str
    is_official: bool = True


class SetTagOfficialUseCase:
    """Use case for marking a tag official. Admin only."""

    def __init__(
        self, tag_service: TagService, permission_service: PermissionService
    ) -> None:
        self.tag_service = tag_service
        self.permission_service = permission_service

    async def execute(self, request: SetTagOfficialRequest) -> TagView:
        self.permission_service.require_admin(request.actor)
        tag = await self.tag_service.get(TagId(UUID(request.tag_id)))
        updated = await self.tag_service.set_official(tag, request.is_official)
        return TagView.from_tag(updated)
