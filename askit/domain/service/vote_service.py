"""Vote domain service."""

from dataclasses import dataclass

import logfire

from askit.domain.error import NotFoundError, SelfVoteError
from askit.domain.model import User
from askit.domain.repository import AnswerRepository, QuestionRepository
from askit.domain.value import (
    AnswerId,
    NotificationPayload,
    NotificationType,
    QuestionId,
    VoteType,
)

from .base import Service
from .notification_service import NotificationDispatcher


@dataclass
class VoteResult:
    """Outcome of casting a vote."""

    vote_count: int
    user_vote: VoteType | None  # None after a retraction


class VoteService(Service):
    """Domain service for voting on questions and answers.

    Casting the same vote twice retracts it, casting the opposite vote
    switches it. The caller's membership is written with one atomic update so
    votes from different users never overwrite each other.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            dispatcher: Notification dispatcher
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.dispatcher = dispatcher

    async def vote_question(
        self, question_id: QuestionId, voter: User, vote_type: VoteType
    ) -> VoteResult:
        """Cast a vote on a question.

        Args:
            question_id: Question ID
            voter: User casting the vote
            vote_type: Upvote or downvote

        Returns:
            New vote count and the voter's resulting vote

        Raises:
            NotFoundError: If the question doesn't exist or is deleted
            SelfVoteError: If the voter wrote the question
        """
        with logfire.span(
            "vote_service.vote_question",
            question_id=str(question_id),
            user_id=str(voter.id),
            vote_type=vote_type.value,
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Vote on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            if question.is_owned_by(voter.id):
                logfire.warn(
                    "Self-vote attempt", question_id=str(question_id), user_id=str(voter.id)
                )
                raise SelfVoteError("question")

            new_vote = question.votes.resolve(voter.id, vote_type)
            updated = await self.question_repository.set_vote(
                question_id, voter.id, new_vote
            )
            if updated is None:
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Question vote recorded",
                question_id=str(question_id),
                user_id=str(voter.id),
                vote=new_vote.value if new_vote else None,
                vote_count=updated.vote_count,
            )

            if new_vote == VoteType.UPVOTE:
                await self.dispatcher.notify(
                    question.author_id,
                    NotificationType.QUESTION_VOTED,
                    "Your question received an upvote",
                    f'{voter.username} upvoted your question "{question.title}"',
                    NotificationPayload(
                        question_id=str(question_id),
                        user_id=str(voter.id),
                        vote_type=VoteType.UPVOTE,
                    ),
                )

            return VoteResult(vote_count=updated.vote_count, user_vote=new_vote)

    async def vote_answer(
        self, answer_id: AnswerId, voter: User, vote_type: VoteType
    ) -> VoteResult:
        """Cast a vote on an answer.

        Raises:
            NotFoundError: If the answer doesn't exist or is deleted
            SelfVoteError: If the voter wrote the answer
        """
        with logfire.span(
            "vote_service.vote_answer",
            answer_id=str(answer_id),
            user_id=str(voter.id),
            vote_type=vote_type.value,
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            if answer.is_owned_by(voter.id):
                logfire.warn(
                    "Self-vote attempt", answer_id=str(answer_id), user_id=str(voter.id)
                )
                raise SelfVoteError("answer")

            new_vote = answer.votes.resolve(voter.id, vote_type)
            updated = await self.answer_repository.set_vote(answer_id, voter.id, new_vote)
            if updated is None:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer vote recorded",
                answer_id=str(answer_id),
                user_id=str(voter.id),
                vote=new_vote.value if new_vote else None,
                vote_count=updated.vote_count,
            )

            if new_vote == VoteType.UPVOTE:
                await self.dispatcher.notify(
                    answer.author_id,
                    NotificationType.ANSWER_VOTED,
                    "Your answer received an upvote",
                    f"{voter.username} upvoted your answer",
                    NotificationPayload(
                        question_id=str(answer.question_id),
                        answer_id=str(answer_id),
                        user_id=str(voter.id),
                        vote_type=VoteType.UPVOTE,
                    ),
                )

            return VoteResult(vote_count=updated.vote_count, user_vote=new_vote)
