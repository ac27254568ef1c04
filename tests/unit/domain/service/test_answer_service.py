"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from askit.domain.error import BusinessRuleViolationError, NotFoundError
from askit.domain.repository import NotificationRepository, QuestionRepository
from askit.domain.service import AcceptanceService, AnswerService, QuestionService
from askit.domain.value import CommentId, NotificationType
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ANSWER_TEXT = "Wrap the call in asyncio.run and await it."


async def _ask(env, author):
    question_service = await env.get(QuestionService)
    return await question_service.create(
        author,
        "How do I call async code from sync?",
        "I have a sync entrypoint and an async library to call.",
        ["python"],
    )


class TestCreateAnswer:
    @pytest.mark.asyncio
    async def test_answer_bumps_count_and_notifies_asker(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("asker")
        question = await _ask(unit_env, asker)

        # Act
        answer = await answer_service.create(question, make_user("helper"), ANSWER_TEXT)

        # Assert
        assert answer.question_id == question.id
        assert (await question_repo.find_by_id(question.id)).answer_count == 1
        (notification,) = await notification_repo.find_for_recipient(asker.id)
        assert notification.type == NotificationType.QUESTION_ANSWERED
        assert notification.payload.answer_id == str(answer.id)

    @pytest.mark.asyncio
    async def test_second_answer_by_same_user_rejected(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        helper = make_user("helper")
        question = await _ask(unit_env, make_user("asker"))
        await answer_service.create(question, helper, ANSWER_TEXT)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already answered"):
            await answer_service.create(question, helper, "Another try at answering this.")

    @pytest.mark.asyncio
    async def test_closed_question_cannot_be_answered(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        question = await _ask(unit_env, make_user("asker"))
        question = await question_service.set_closed(question, True)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="closed question"):
            await answer_service.create(question, make_user("helper"), ANSWER_TEXT)

    @pytest.mark.asyncio
    async def test_answering_own_question_does_not_notify(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        asker = make_user("asker")
        question = await _ask(unit_env, asker)

        await answer_service.create(question, asker, ANSWER_TEXT)

        assert await notification_repo.count_for_recipient(asker.id) == 0


class TestDeleteAnswer:
    @pytest.mark.asyncio
    async def test_deleting_accepted_answer_clears_acceptance(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        asker = make_user("asker")
        question = await _ask(unit_env, asker)
        answer = await answer_service.create(question, make_user("helper"), ANSWER_TEXT)
        await acceptance_service.toggle_accept(answer.id, asker)
        answer = await answer_service.get(answer.id)

        # Act
        await answer_service.delete(answer)

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert stored.accepted_answer_id is None
        assert stored.answer_count == 0
        with pytest.raises(NotFoundError):
            await answer_service.get(answer.id)


class TestComments:
    @pytest.mark.asyncio
    async def test_comment_is_added_and_removed(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        notification_repo = await unit_env.get(NotificationRepository)
        helper = make_user("helper")
        question = await _ask(unit_env, make_user("asker"))
        answer = await answer_service.create(question, helper, ANSWER_TEXT)

        # Act
        comment = await answer_service.add_comment(
            answer, make_user("reader", reputation=60), "Thanks, that worked!"
        )

        # Assert
        answer = await answer_service.get(answer.id)
        assert [c.id for c in answer.comments] == [comment.id]
        types = [n.type for n in await notification_repo.find_for_recipient(helper.id)]
        assert types == [NotificationType.COMMENT_ADDED]

        # Act
        await answer_service.remove_comment(answer, comment.id)

        # Assert
        assert (await answer_service.get(answer.id)).comments == ()

    @pytest.mark.asyncio
    async def test_unknown_comment_raises_not_found(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _ask(unit_env, make_user("asker"))
        answer = await answer_service.create(question, make_user("helper"), ANSWER_TEXT)

        with pytest.raises(NotFoundError, match="Comment not found"):
            answer_service.get_comment(answer, CommentId(uuid4()))
