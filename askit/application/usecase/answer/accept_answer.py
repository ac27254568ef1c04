"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.domain.model import User
from askit.domain.service import AcceptanceService, PermissionService
from askit.domain.value import AnswerId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    actor: User
    answer_id: str


class AcceptAnswerResponse(BaseModel):
    """Acceptance state after the toggle."""

    answer_id: str
    question_id: str
    is_accepted: bool


class AcceptAnswerUseCase:
    """Use case for accepting an answer, or unaccepting an accepted one."""

    def __init__(
        self,
        acceptance_service: AcceptanceService,
        permission_service: PermissionService,
    ) -> None:
        self.acceptance_service = acceptance_service
        self.permission_service = permission_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            ForbiddenError: If the user is banned
            NotFoundError: If the answer or its question is missing
            NotAuthorizedError: If the user is neither the question author nor an admin
        """
        self.permission_service.ensure_active(request.actor)
        result = await self.acceptance_service.toggle_accept(
            AnswerId(UUID(request.answer_id)), request.actor
        )
        return AcceptAnswerResponse(
            answer_id=str(result.answer_id),
            question_id=str(result.question_id),
            is_accepted=result.is_accepted,
        )
