"""Remove comment use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.domain.model import User
from askit.domain.service import AnswerService, PermissionService
from askit.domain.value import AnswerId, CommentId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    actor: User
    answer_id: str
    comment_id: str


class RemoveCommentUseCase:
    """Use case for removing a comment from an answer.

    The comment author and moderators may remove a comment.
    """

    def __init__(
        self, answer_service: AnswerService, permission_service: PermissionService
    ) -> None:
        self.answer_service = answer_service
        self.permission_service = permission_service

    async def execute(self, request: RemoveCommentRequest) -> None:
        answer = await self.answer_service.get(AnswerId(UUID(request.answer_id)))
        comment_id = CommentId(UUID(request.comment_id))
        comment = self.answer_service.get_comment(answer, comment_id)

        self.permission_service.require_owner_or_moderator(
            request.actor, comment.author_id, "comment", request.comment_id
        )
        await self.answer_service.remove_comment(answer, comment_id)
