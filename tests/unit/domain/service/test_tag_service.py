"""Unit tests for TagService."""

import pytest

from askit.domain.error import BusinessRuleViolationError, ValidationError
from askit.domain.repository import TagRepository
from askit.domain.service import QuestionService, TagService
from askit.domain.value import TagName
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveTags:
    @pytest.mark.asyncio
    async def test_names_are_normalized_and_deduplicated(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        user = make_user()

        # Act
        tags = await tag_service.resolve_tags([" Python ", "python", "ASYNC"], user.id)

        # Assert
        assert [t.name.root for t in tags] == ["python", "async"]

    @pytest.mark.asyncio
    async def test_existing_tag_is_reused(self, unit_env):
        tag_service = await unit_env.get(TagService)
        user = make_user()
        existing = await tag_service.create("python", user.id)

        (tag,) = await tag_service.resolve_tags(["python"], user.id)

        assert tag.id == existing.id

    @pytest.mark.asyncio
    async def test_more_than_five_tags_rejected(self, unit_env):
        tag_service = await unit_env.get(TagService)

        with pytest.raises(ValidationError, match="between 1 and 5"):
            await tag_service.resolve_tags(
                ["aa", "bb", "cc", "dd", "ee", "ff"], make_user().id
            )

    @pytest.mark.asyncio
    async def test_invalid_name_rejected(self, unit_env):
        tag_service = await unit_env.get(TagService)

        with pytest.raises(ValidationError, match="Invalid tag name"):
            await tag_service.resolve_tags(["c++"], make_user().id)


class TestUsageCounters:
    """Question counts follow questions being asked, retagged and deleted."""

    @pytest.mark.asyncio
    async def test_counts_follow_question_lifecycle(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        tag_repo = await unit_env.get(TagRepository)
        author = make_user()

        # Act - ask
        question = await question_service.create(
            author,
            "What is a coroutine really?",
            "Trying to understand the await keyword in detail.",
            ["python", "async"],
        )

        # Assert
        python = await tag_repo.find_by_name(TagName("python"))
        asyncio_tag = await tag_repo.find_by_name(TagName("async"))
        assert python.question_count == 1
        assert asyncio_tag.question_count == 1

        # Act - retag
        question = await question_service.update(
            question, author, tag_names=["python", "generators"]
        )

        # Assert
        assert (await tag_repo.find_by_id(python.id)).question_count == 1
        assert (await tag_repo.find_by_id(asyncio_tag.id)).question_count == 0
        generators = await tag_repo.find_by_name(TagName("generators"))
        assert generators.question_count == 1

        # Act - delete
        await question_service.delete(question)

        # Assert
        assert (await tag_repo.find_by_id(python.id)).question_count == 0
        assert (await tag_repo.find_by_id(generators.id)).question_count == 0


class TestCreateAndDelete:
    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, unit_env):
        tag_service = await unit_env.get(TagService)
        user = make_user()
        await tag_service.create("rust", user.id)

        with pytest.raises(BusinessRuleViolationError, match="Tag already exists"):
            await tag_service.create("Rust", user.id)

    @pytest.mark.asyncio
    async def test_create_with_description_and_color(self, unit_env):
        tag_service = await unit_env.get(TagService)

        tag = await tag_service.create(
            "docker", make_user().id, description="Containers", color="#2496ED"
        )

        assert tag.description == "Containers"
        assert tag.color == "#2496ED"

    @pytest.mark.asyncio
    async def test_tag_in_use_cannot_be_deleted(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        question_service = await unit_env.get(QuestionService)
        author = make_user()
        await question_service.create(
            author,
            "Why is my build so slow?",
            "Every docker build takes ten minutes on my laptop.",
            ["docker"],
        )
        tag = await tag_service.get_by_name("docker")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="used by 1 questions"):
            await tag_service.delete(tag)

    @pytest.mark.asyncio
    async def test_unused_tag_is_deleted(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.create("unused", make_user().id)

        # Act
        await tag_service.delete(tag)

        # Assert
        assert await tag_service.get_by_name("unused") is None
