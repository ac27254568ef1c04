"""Unit tests for question listing and reading use cases."""

import pytest

from askit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from askit.domain.error import ForbiddenError
from askit.domain.repository import UserRepository
from askit.domain.repository.question import QuestionSortOrder
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _ask(env, actor, title, tags):
    use_case = await env.get(CreateQuestionUseCase)
    return await use_case.execute(
        CreateQuestionRequest(
            actor=actor,
            title=title,
            description="A description long enough to pass validation.",
            tags=tags,
        )
    )


class TestCreateQuestion:
    @pytest.mark.asyncio
    async def test_view_carries_author_and_tags(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("asker"))

        # Act
        view = await _ask(unit_env, author, "How do tags get created?", ["New-Tag", "python"])

        # Assert
        assert view.author.username == "asker"
        assert [t.name for t in view.tags] == ["new-tag", "python"]
        assert view.vote_count == 0
        assert view.answer_count == 0
        assert view.user_vote is None

    @pytest.mark.asyncio
    async def test_banned_user_cannot_ask(self, unit_env):
        banned = make_user("banned", is_banned=True)

        with pytest.raises(ForbiddenError):
            await _ask(unit_env, banned, "Can I still post here?", ["python"])


class TestListQuestions:
    @pytest.mark.asyncio
    async def test_filter_by_tag_and_paginate(self, unit_env):
        # Arrange
        list_questions = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("asker"))
        for n in range(3):
            await _ask(unit_env, author, f"Python question number {n}", ["python"])
        await _ask(unit_env, author, "A question about rust only", ["rust"])

        # Act
        first_page = await list_questions.execute(
            ListQuestionsRequest(tag="python", limit=2, page=1)
        )
        second_page = await list_questions.execute(
            ListQuestionsRequest(tag="python", limit=2, page=2)
        )

        # Assert
        assert first_page.pagination.total == 3
        assert first_page.pagination.pages == 2
        assert len(first_page.questions) == 2
        assert len(second_page.questions) == 1

    @pytest.mark.asyncio
    async def test_unknown_tag_or_author_returns_empty_page(self, unit_env):
        list_questions = await unit_env.get(ListQuestionsUseCase)
        author = make_user("asker")
        await _ask(unit_env, author, "Something about python", ["python"])

        by_tag = await list_questions.execute(ListQuestionsRequest(tag="cobol"))
        by_author = await list_questions.execute(ListQuestionsRequest(author="ghost"))

        assert by_tag.questions == [] and by_tag.pagination.total == 0
        assert by_author.questions == [] and by_author.pagination.total == 0

    @pytest.mark.asyncio
    async def test_search_matches_title_case_insensitively(self, unit_env):
        list_questions = await unit_env.get(ListQuestionsUseCase)
        author = make_user("asker")
        await _ask(unit_env, author, "Understanding Decorators deeply", ["python"])
        await _ask(unit_env, author, "Understanding lifetimes deeply", ["rust"])

        result = await list_questions.execute(
            ListQuestionsRequest(search="decorators", sort=QuestionSortOrder.NEWEST)
        )

        assert [q.title for q in result.questions] == ["Understanding Decorators deeply"]

    @pytest.mark.asyncio
    async def test_page_size_is_capped(self, unit_env):
        list_questions = await unit_env.get(ListQuestionsUseCase)

        result = await list_questions.execute(ListQuestionsRequest(limit=500))

        assert result.pagination.limit == 50


class TestGetQuestion:
    @pytest.mark.asyncio
    async def test_each_read_counts_a_view(self, unit_env):
        # Arrange
        get_question = await unit_env.get(GetQuestionUseCase)
        question = await _ask(unit_env, make_user("asker"), "Do views get counted?", ["meta"])

        # Act
        await get_question.execute(GetQuestionRequest(question_id=question.id))
        result = await get_question.execute(GetQuestionRequest(question_id=question.id))

        # Assert
        assert result.question.views == 2
        assert result.answers == []
