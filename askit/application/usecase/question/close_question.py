"""Close or reopen question use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import QuestionView, ViewAssembler
from askit.domain.model import User
from askit.domain.service import PermissionService, QuestionService
from askit.domain.value import QuestionId


class CloseQuestionRequest(BaseModel):
    """Close question request."""

    actor: User
    question_id: str
    is_closed: bool


class CloseQuestionUseCase:
    """Use case for closing a question to new answers, or reopening it."""

    def __init__(
        self,
        question_service: QuestionService,
        permission_service: PermissionService,
        assembler: ViewAssembler,
    ) -> None:
        self.question_service = question_service
        self.permission_service = permission_service
        self.assembler = assembler

    async def execute(self, request: CloseQuestionRequest) -> QuestionView:
        """Execute close question flow.

        Raises:
            NotFoundError: If the question doesn't exist or is deleted
            NotAuthorizedError: If the user is not the author, an admin or a
                user with enough reputation to close questions
        """
        question = await self.question_service.get(
            QuestionId(UUID(request.question_id))
        )
        self.permission_service.require_can_close(
            request.actor, question.author_id, request.question_id
        )
        updated = await self.question_service.set_closed(question, request.is_closed)
        return await self.assembler.question(updated, request.actor.id)
