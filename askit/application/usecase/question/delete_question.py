"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.domain.model import User
from askit.domain.service import PermissionService, QuestionService
from askit.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    actor: User
    question_id: str


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question."""

    def __init__(
        self, question_service: QuestionService, permission_service: PermissionService
    ) -> None:
        self.question_service = question_service
        self.permission_service = permission_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question doesn't exist or is deleted
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        question = await self.question_service.get(
            QuestionId(UUID(request.question_id))
        )
        self.permission_service.require_owner_or_admin(
            request.actor, question.author_id, "question", request.question_id
        )
        await self.question_service.delete(question)
