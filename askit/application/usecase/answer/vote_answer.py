"""Vote on answer use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import VoteView
from askit.domain.model import User
from askit.domain.service import PermissionService, VoteService
from askit.domain.value import AnswerId, VoteType


class VoteAnswerRequest(BaseModel):
    """Vote on answer request."""

    actor: User
    answer_id: str
    vote_type: VoteType


class VoteAnswerUseCase:
    """Use case for voting on an answer."""

    def __init__(
        self, vote_service: VoteService, permission_service: PermissionService
    ) -> None:
        self.vote_service = vote_service
        self.permission_service = permission_service

    async def execute(self, request: VoteAnswerRequest) -> VoteView:
        """Execute vote flow.

        Raises:
            ForbiddenError: If the user is banned, lacks reputation or wrote
                the answer
            NotFoundError: If the answer doesn't exist or is deleted
        """
        self.permission_service.require_can_vote(request.actor)
        result = await self.vote_service.vote_answer(
            AnswerId(UUID(request.answer_id)), request.actor, request.vote_type
        )
        return VoteView(vote_count=result.vote_count, user_vote=result.user_vote)
