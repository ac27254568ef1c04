"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from askit.application.assembly import QuestionView, ViewAssembler
from askit.domain.model import User
from askit.domain.service import PermissionService, QuestionService
from askit.domain.value import QuestionId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Unset fields are left unchanged."""

    actor: User
    question_id: str
    title: str | None = Field(default=None, min_length=10, max_length=200)
    description: str | None = Field(default=None, min_length=20)
    tags: list[str] | None = Field(default=None, min_length=1, max_length=5)


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(
        self,
        question_service: QuestionService,
        permission_service: PermissionService,
        assembler: ViewAssembler,
    ) -> None:
        self.question_service = question_service
        self.permission_service = permission_service
        self.assembler = assembler

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Execute update question flow.

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

        updated = await self.question_service.update(
            question,
            request.actor,
            title=request.title,
            description=request.description,
            tag_names=request.tags,
        )
        return await self.assembler.question(updated, request.actor.id)
