"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from askit.application.assembly import CommentView, ViewAssembler
from askit.domain.model import User
from askit.domain.service import AnswerService, PermissionService
from askit.domain.value import AnswerId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    actor: User
    answer_id: str
    content: str = Field(min_length=2, max_length=1000)


class AddCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        permission_service: PermissionService,
        assembler: ViewAssembler,
    ) -> None:
        self.answer_service = answer_service
        self.permission_service = permission_service
        self.assembler = assembler

    async def execute(self, request: AddCommentRequest) -> CommentView:
        """Execute add comment flow.

        Raises:
            ForbiddenError: If the user is banned or lacks reputation
            NotFoundError: If the answer doesn't exist or is deleted
        """
        self.permission_service.require_can_comment(request.actor)
        answer = await self.answer_service.get(AnswerId(UUID(request.answer_id)))
        comment = await self.answer_service.add_comment(
            answer, request.actor, request.content
        )
        return await self.assembler.comment(comment)
