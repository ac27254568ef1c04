"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from askit.domain.error import NotFoundError, SelfVoteError
from askit.domain.model import User
from askit.domain.repository import NotificationRepository, QuestionRepository
from askit.domain.service import AnswerService, QuestionService, VoteService
from askit.domain.value import NotificationType, QuestionId, VoteType
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory, no docker needed
unit_env = create_env_fixture()


async def _ask(env, author: User):
    question_service = await env.get(QuestionService)
    return await question_service.create(
        author,
        "How do I test async code?",
        "I need to run coroutines under pytest without boilerplate.",
        ["python", "testing"],
    )


class TestVoteQuestion:
    """Tests for vote_question."""

    @pytest.mark.asyncio
    async def test_upvote_increments_count_and_notifies_author(self, unit_env):
        """A fresh upvote should count and tell the question author."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = make_user("author")
        voter = make_user("voter", reputation=20)
        question = await _ask(unit_env, author)

        # Act
        result = await vote_service.vote_question(question.id, voter, VoteType.UPVOTE)

        # Assert
        assert result.vote_count == 1
        assert result.user_vote == VoteType.UPVOTE

        notifications = await notification_repo.find_for_recipient(author.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.QUESTION_VOTED
        assert notifications[0].payload.question_id == str(question.id)
        assert "voter" in notifications[0].message

    @pytest.mark.asyncio
    async def test_repeating_upvote_retracts_without_notifying(self, unit_env):
        """Voting the same way twice should retract the vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        author = make_user("author")
        voter = make_user("voter", reputation=20)
        question = await _ask(unit_env, author)
        await vote_service.vote_question(question.id, voter, VoteType.UPVOTE)

        # Act
        result = await vote_service.vote_question(question.id, voter, VoteType.UPVOTE)

        # Assert
        assert result.vote_count == 0
        assert result.user_vote is None
        stored = await question_repo.find_by_id(question.id)
        assert stored.votes.vote_of(voter.id) is None
        assert await notification_repo.count_for_recipient(author.id) == 1

    @pytest.mark.asyncio
    async def test_switching_vote_moves_voter(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        author = make_user("author")
        voter = make_user("voter", reputation=20)
        question = await _ask(unit_env, author)
        await vote_service.vote_question(question.id, voter, VoteType.UPVOTE)

        # Act
        result = await vote_service.vote_question(question.id, voter, VoteType.DOWNVOTE)

        # Assert
        assert result.vote_count == -1
        assert result.user_vote == VoteType.DOWNVOTE

    @pytest.mark.asyncio
    async def test_downvote_does_not_notify(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = make_user("author")
        question = await _ask(unit_env, author)

        # Act
        await vote_service.vote_question(
            question.id, make_user("critic", reputation=20), VoteType.DOWNVOTE
        )

        # Assert
        assert await notification_repo.count_for_recipient(author.id) == 0

    @pytest.mark.asyncio
    async def test_self_vote_is_rejected(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        author = make_user("author", reputation=100)
        question = await _ask(unit_env, author)

        # Act & Assert
        with pytest.raises(SelfVoteError):
            await vote_service.vote_question(question.id, author, VoteType.UPVOTE)

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await vote_service.vote_question(
                QuestionId(uuid4()), make_user("voter"), VoteType.UPVOTE
            )


class TestVoteAnswer:
    """Tests for vote_answer."""

    @pytest.mark.asyncio
    async def test_upvote_answer_notifies_answer_author(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("asker")
        answerer = make_user("answerer")
        question = await _ask(unit_env, asker)
        answer = await answer_service.create(
            question, answerer, "Use pytest-asyncio and mark the tests."
        )

        # Act
        result = await vote_service.vote_answer(
            answer.id, make_user("voter", reputation=20), VoteType.UPVOTE
        )

        # Assert
        assert result.vote_count == 1
        notifications = await notification_repo.find_for_recipient(answerer.id)
        assert [n.type for n in notifications] == [NotificationType.ANSWER_VOTED]

    @pytest.mark.asyncio
    async def test_self_vote_on_answer_is_rejected(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        answer_service = await unit_env.get(AnswerService)
        answerer = make_user("answerer", reputation=100)
        question = await _ask(unit_env, make_user("asker"))
        answer = await answer_service.create(
            question, answerer, "Use pytest-asyncio and mark the tests."
        )

        # Act & Assert
        with pytest.raises(SelfVoteError, match="your own answer"):
            await vote_service.vote_answer(answer.id, answerer, VoteType.DOWNVOTE)
