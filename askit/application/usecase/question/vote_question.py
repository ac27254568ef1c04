"""Vote on question use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.application.assembly import VoteView
from askit.domain.model import User
from askit.domain.service import PermissionService, VoteService
from askit.domain.value import QuestionId, VoteType


class VoteQuestionRequest(BaseModel):
    """Vote on question request."""

    actor: User
    question_id: str
    vote_type: VoteType


class VoteQuestionUseCase:
    """Use case for voting on a question."""

    def __init__(
        self, vote_service: VoteService, permission_service: PermissionService
    ) -> None:
        """Initialize vote question use case.

        Args:
            vote_service: Vote domain service
            permission_service: Permission domain service
        """
        self.vote_service = vote_service
        self.permission_service = permission_service

    async def execute(self, request: VoteQuestionRequest) -> VoteView:
        """Execute vote flow.

        Raises:
            ForbiddenError: If the user is banned, lacks reputation or wrote
                the question
            NotFoundError: If the question doesn't exist or is deleted
        """
        self.permission_service.require_can_vote(request.actor)
        result = await self.vote_service.vote_question(
            QuestionId(UUID(request.question_id)), request.actor, request.vote_type
        )
        return VoteView(vote_count=result.vote_count, user_vote=result.user_vote)
