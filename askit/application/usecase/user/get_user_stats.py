"""Get user stats use case."""

from uuid import UUID

from pydantic import BaseModel

from askit.domain.service import UserService
from askit.domain.value import UserId


class GetUserStatsRequest(BaseModel):
    user_id: str


class GetUserStatsResponse(BaseModel):
    """Activity counters of a user."""

    user_id: str
    question_count: int
    answer_count: int
    accepted_answer_count: int
    total_votes: int
    reputation: int


class GetUserStatsUseCase:
    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserStatsRequest) -> GetUserStatsResponse:
        stats = await self.user_service.get_stats(UserId(UUID(request.user_id)))
        return GetUserStatsResponse(
            user_id=request.user_id,
            question_count=stats.question_count,
            answer_count=stats.answer_count,
            accepted_answer_count=stats.accepted_answer_count,
            total_votes=stats.total_votes,
            reputation=stats.reputation,
        )
