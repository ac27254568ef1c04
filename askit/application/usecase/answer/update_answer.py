"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from askit.application.assembly import AnswerView, ViewAssembler
from askit.domain.model import User
from askit.domain.service import AnswerService, PermissionService
from askit.domain.value import AnswerId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    actor: User
    answer_id: str
    content: str = Field(min_length=10, max_length=10000)


class UpdateAnswerUseCase:
    """Use case for editing an answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        permission_service: PermissionService,
        assembler: ViewAssembler,
    ) -> None:
        self.answer_service = answer_service
        self.permission_service = permission_service
        self.assembler = assembler

    async def execute(self, request: UpdateAnswerRequest) -> AnswerView:
        answer = await self.answer_service.get(AnswerId(UUID(request.answer_id)))
        self.permission_service.require_owner_or_admin(
            request.actor, answer.author_id, "answer", request.answer_id
        )
        updated = await self.answer_service.update(answer, request.content)
        return await self.assembler.answer(updated, request.actor.id)
