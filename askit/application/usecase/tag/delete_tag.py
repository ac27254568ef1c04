"""Delete tag use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.domain.model import User
from askit.domain.service import PermissionService, TagService
from askit.domain.value import TagId


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    actor: User
    tag_id: str


class DeleteTagUseCase:
    """Use case for deleting an unused tag."""

    def __init__(
        self, tag_service: TagService, permission_service: PermissionService
    ) -> None:
        self.tag_service = tag_service
        self.permission_service = permission_service

    async def execute(self, request: DeleteTagRequest) -> None:
        """Execute delete tag flow.

        Raises:
            NotFoundError: If the tag doesn't exist or is deleted
            NotAuthorizedError: If the user is neither the creator nor an admin
            BusinessRuleViolationError: If questions still use the tag
        """
        tag = await self.tag_service.get(TagId(UUID(request.tag_id)))
        self.permission_service.require_owner_or_admin(
            request.actor, tag.created_by, "tag", request.tag_id
        )
        await self.tag_service.delete(tag)
