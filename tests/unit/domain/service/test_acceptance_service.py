"""Unit tests for AcceptanceService."""

import pytest

from askit.domain.error import NotAuthorizedError
from askit.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
)
from askit.domain.service import AcceptanceService, AnswerService, QuestionService
from askit.domain.value import NotificationType, Role
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def asker():
    return make_user("asker")


async def _thread(env, asker, *answerers):
    """A question by ``asker`` with one answer per answerer."""
    question_service = await env.get(QuestionService)
    answer_service = await env.get(AnswerService)
    question = await question_service.create(
        asker,
        "Why does my loop never end?",
        "The while loop keeps running even after the flag flips.",
        ["python"],
    )
    answers = [
        await answer_service.create(
            question, answerer, f"Check the flag update, says {answerer.username}."
        )
        for answerer in answerers
    ]
    return question, answers


class TestToggleAccept:
    @pytest.mark.asyncio
    async def test_question_author_accepts_answer(self, unit_env, asker):
        """Accepting marks the answer and the question and notifies the answerer."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        answerer = make_user("helper")
        question, (answer,) = await _thread(unit_env, asker, answerer)

        # Act
        result = await acceptance_service.toggle_accept(answer.id, asker)

        # Assert
        assert result.is_accepted is True
        assert (await answer_repo.find_by_id(answer.id)).is_accepted
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == answer.id

        types = [n.type for n in await notification_repo.find_for_recipient(answerer.id)]
        assert NotificationType.ANSWER_ACCEPTED in types

    @pytest.mark.asyncio
    async def test_accepting_again_unaccepts(self, unit_env, asker):
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        question_repo = await unit_env.get(QuestionRepository)
        question, (answer,) = await _thread(unit_env, asker, make_user("helper"))
        await acceptance_service.toggle_accept(answer.id, asker)

        # Act
        result = await acceptance_service.toggle_accept(answer.id, asker)

        # Assert
        assert result.is_accepted is False
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id is None

    @pytest.mark.asyncio
    async def test_accepting_another_answer_moves_acceptance(self, unit_env, asker):
        """At most one answer per question is accepted."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_repo = await unit_env.get(QuestionRepository)
        question, (first, second) = await _thread(
            unit_env, asker, make_user("first"), make_user("second")
        )
        await acceptance_service.toggle_accept(first.id, asker)

        # Act
        await acceptance_service.toggle_accept(second.id, asker)

        # Assert
        assert not (await answer_repo.find_by_id(first.id)).is_accepted
        assert (await answer_repo.find_by_id(second.id)).is_accepted
        assert (await question_repo.find_by_id(question.id)).accepted_answer_id == second.id

    @pytest.mark.asyncio
    async def test_other_users_cannot_accept(self, unit_env, asker):
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        answerer = make_user("helper")
        _, (answer,) = await _thread(unit_env, asker, answerer)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await acceptance_service.toggle_accept(answer.id, answerer)

    @pytest.mark.asyncio
    async def test_admin_can_accept(self, unit_env, asker):
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        _, (answer,) = await _thread(unit_env, asker, make_user("helper"))
        admin = make_user("admin", role=Role.ADMIN)

        # Act
        result = await acceptance_service.toggle_accept(answer.id, admin)

        # Assert
        assert result.is_accepted is True

    @pytest.mark.asyncio
    async def test_accepting_own_answer_does_not_notify(self, unit_env, asker):
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        notification_repo = await unit_env.get(NotificationRepository)
        _, (answer,) = await _thread(unit_env, asker, asker)

        # Act
        await acceptance_service.toggle_accept(answer.id, asker)

        # Assert
        assert await notification_repo.count_for_recipient(asker.id) == 0
