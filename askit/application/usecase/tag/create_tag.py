"""Create tag use case."""

from pydantic import BaseModel, Field

from askit.application.assembly import TagView
from askit.domain.model import User
from askit.domain.service import PermissionService, TagService


class CreateTagRequest(BaseModel):
    """Create tag request."""

    actor: User
    name: str = Field(min_length=2, max_length=20)
    description: str | None = Field(default=None, max_length=500)
    color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")


class CreateTagUseCase:
    """Use case for creating a tag explicitly."""

    def __init__(
        self, tag_service: TagService, permission_service: PermissionService
    ) -> None:
        self.tag_service = tag_service
        self.permission_service = permission_service

    async def execute(self, request: CreateTagRequest) -> TagView:
        """Execute create tag flow.

        Raises:
            ForbiddenError: If the user is banned or lacks reputation
            BusinessRuleViolationError: If the tag already exists
        """
        self.permission_service.require_can_create_tags(request.actor)
        tag = await self.tag_service.create(
            request.name,
            request.actor.id,
            description=request.description,
            color=request.color,
        )
        return TagView.from_tag(tag)
