"""Integration tests for the PostgreSQL repositories.

Needs a migrated database at DATABASE__URL; skipped otherwise.
"""

import os
from uuid import uuid4

import pytest

from askit.domain.model import Answer, Comment, Question, Tag
from askit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from askit.domain.value import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    TagName,
    VoteType,
)
from tests.factories import make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.environ.get("DATABASE__URL"), reason="DATABASE__URL is not set"
    ),
]

integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}{uuid4().hex[:10]}"


async def _seed(env):
    """Save an author, a voter, a tag and a question."""
    users = await env.get(UserRepository)
    tags = await env.get(TagRepository)
    questions = await env.get(QuestionRepository)

    author = await users.save(make_user(_unique("author")))
    voter = await users.save(make_user(_unique("voter"), reputation=20))
    tag = await tags.save(Tag(id=TagId(uuid4()), name=TagName(_unique("it-"))))
    question = await questions.save(
        Question(
            id=QuestionId(uuid4()),
            title="How do I test repositories?",
            description="Against a real database.",
            author_id=author.id,
            tag_ids=[tag.id],
        )
    )
    return author, voter, tag, question


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_soft_deleted_user_frees_username_and_email(self, integration_env):
        # Arrange
        repo = await integration_env.get(UserRepository)
        old = await repo.save(make_user(_unique("dave")))
        await repo.save(old.soft_delete())

        # Act
        new = await repo.save(make_user(old.username))

        # Assert
        assert new.id != old.id
        assert (await repo.find_by_username(old.username)).id == new.id
        assert (await repo.find_by_email(old.email)).id == new.id

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive_on_email(self, integration_env):
        repo = await integration_env.get(UserRepository)
        user = await repo.save(make_user(_unique("carol")))

        found = await repo.find_by_email(user.email.upper())

        assert found is not None
        assert found.id == user.id


class TestQuestionRepository:
    @pytest.mark.asyncio
    async def test_set_vote_moves_voter_between_sets(self, integration_env):
        # Arrange
        repo = await integration_env.get(QuestionRepository)
        _, voter, _, question = await _seed(integration_env)

        # Act
        up = await repo.set_vote(question.id, voter.id, VoteType.UP)
        down = await repo.set_vote(question.id, voter.id, VoteType.DOWN)
        cleared = await repo.set_vote(question.id, voter.id, None)

        # Assert
        assert up.vote_count == 1
        assert down.vote_count == -1
        assert cleared.vote_count == 0
        assert cleared.votes.vote_of(voter.id) is None

    @pytest.mark.asyncio
    async def test_counters(self, integration_env):
        repo = await integration_env.get(QuestionRepository)
        _, _, tag, question = await _seed(integration_env)

        await repo.increment_views(question.id)
        await repo.adjust_answer_count(question.id, 1)
        await repo.adjust_answer_count(question.id, -5)

        stored = await repo.find_by_id(question.id)
        assert stored.views == 1
        assert stored.answer_count == 0
        assert await repo.count_by_tag(tag.id) == 1


class TestTagRepository:
    @pytest.mark.asyncio
    async def test_soft_deleted_tag_name_can_be_reused(self, integration_env):
        # Arrange
        repo = await integration_env.get(TagRepository)
        name = TagName(_unique("re-"))
        old = await repo.save(Tag(id=TagId(uuid4()), name=name))
        await repo.save(old.soft_delete())

        # Act
        new = await repo.save(Tag(id=TagId(uuid4()), name=name))

        # Assert
        assert (await repo.find_by_name(name)).id == new.id
        assert await repo.find_by_id(old.id) is None

    @pytest.mark.asyncio
    async def test_question_count_never_negative(self, integration_env):
        repo = await integration_env.get(TagRepository)
        _, _, tag, _ = await _seed(integration_env)

        await repo.adjust_question_count([tag.id], 2)
        await repo.adjust_question_count([tag.id], -3)

        assert (await repo.find_by_id(tag.id)).question_count == 0


class TestAnswerRepository:
    @pytest.mark.asyncio
    async def test_comments_and_acceptance_round_trip(self, integration_env):
        # Arrange
        repo = await integration_env.get(AnswerRepository)
        author, voter, _, question = await _seed(integration_env)
        answer = await repo.save(
            Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                author_id=voter.id,
                content="Use a throwaway database.",
            )
        )
        comment = Comment(id=CommentId(uuid4()), content="Thanks!", author_id=author.id)

        # Act
        await repo.update_comments(answer.id, [comment])
        await repo.set_accepted(answer.id, True)
        stored = await repo.find_by_id(answer.id)
        cleared = await repo.clear_accepted(question.id)

        # Assert
        assert [c.id for c in stored.comments] == [comment.id]
        assert stored.is_accepted
        assert cleared == 1
        assert await repo.count_by_question(question.id) == 1
