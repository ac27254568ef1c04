"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.domain.model import User
from askit.domain.service import AnswerService, PermissionService
from askit.domain.value import AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    actor: User
    answer_id: str


class DeleteAnswerUseCase:
    """Use case for soft-deleting an answer."""

    def __init__(
        self, answer_service: AnswerService, permission_service: PermissionService
    ) -> None:
        self.answer_service = answer_service
        self.permission_service = permission_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer doesn't exist or is deleted
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        answer = await self.answer_service.get(AnswerId(UUID(request.answer_id)))
        self.permission_service.require_owner_or_admin(
            request.actor, answer.author_id, "answer", request.answer_id
        )
        await self.answer_service.delete(answer)
