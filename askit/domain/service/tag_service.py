"""Tag domain service."""

from typing import Iterable, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from askit.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from askit.domain.model import Tag
from askit.domain.repository import QuestionRepository, TagRepository, TagSortOrder
from askit.domain.value import TagId, TagName, UserId

from .base import Service

MAX_TAGS_PER_QUESTION = 5


class TagService(Service):
    """Domain service for tag operations.

    Tags are reference counted: ``question_count`` moves with every question
    that starts or stops using the tag, through atomic store-level increments.
    """

    def __init__(
        self, tag_repository: TagRepository, question_repository: QuestionRepository
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            question_repository: Question repository, for usage checks
        """
        self.tag_repository = tag_repository
        self.question_repository = question_repository

    @staticmethod
    def parse_name(raw: str) -> TagName:
        """Normalize and validate a user supplied tag name.

        Raises:
            ValidationError: If the name is not a valid tag name
        """
        try:
            return TagName.normalize(raw)
        except PydanticValidationError:
            raise ValidationError(
                f"Invalid tag name '{raw}': use 2-20 lowercase letters, digits or hyphens"
            )

    async def get(self, tag_id: TagId) -> Tag:
        with logfire.span("tag_service.get", tag_id=str(tag_id)):
            tag = await self.tag_repository.find_by_id(tag_id)
            if not tag:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundError("Tag", str(tag_id))
            return tag

    async def get_by_name(self, name: str) -> Tag | None:
        """Look up an undeleted tag for a read filter.

        A name no tag could have (e.g. ``c++``) matches nothing.
        """
        try:
            tag_name = TagName.normalize(name)
        except PydanticValidationError:
            return None
        return await self.tag_repository.find_by_name(tag_name)

    async def find_or_create(self, name: str, created_by: UserId) -> Tag:
        """Look up an undeleted tag by name, creating it when absent.

        Args:
            name: Raw tag name (trimmed and lowercased here)
            created_by: User credited with a newly created tag

        Returns:
            The existing or newly created tag
        """
        tag_name = self.parse_name(name)
        with logfire.span("tag_service.find_or_create", tag_name=tag_name.root):
            existing = await self.tag_repository.find_by_name(tag_name)
            if existing:
                return existing

            tag = Tag(id=TagId(uuid4()), name=tag_name, created_by=created_by)
            saved = await self.tag_repository.save(tag)
            logfire.info("Tag created on demand", tag_id=str(saved.id), tag_name=tag_name.root)
            return saved

    async def resolve_tags(self, names: Sequence[str], created_by: UserId) -> list[Tag]:
        """Turn the tag names of a question into tags.

        Names are normalized and de-duplicated in order before lookup.

        Raises:
            ValidationError: If there are no tags or more than five
        """
        unique: list[str] = []
        for raw in names:
            normalized = self.parse_name(raw).root
            if normalized not in unique:
                unique.append(normalized)

        if not 1 <= len(unique) <= MAX_TAGS_PER_QUESTION:
            raise ValidationError(
                f"A question must have between 1 and {MAX_TAGS_PER_QUESTION} tags"
            )

        return [await self.find_or_create(name, created_by) for name in unique]

    async def increment_usage(self, tag_ids: Iterable[TagId]) -> None:
        await self.tag_repository.adjust_question_count(list(tag_ids), 1)

    async def decrement_usage(self, tag_ids: Iterable[TagId]) -> None:
        await self.tag_repository.adjust_question_count(list(tag_ids), -1)

    async def rebalance_usage(
        self, old_tag_ids: Iterable[TagId], new_tag_ids: Iterable[TagId]
    ) -> None:
        """Move usage counters from a question's old tags to its new ones."""
        old, new = set(old_tag_ids), set(new_tag_ids)
        await self.decrement_usage(old - new)
        await self.increment_usage(new - old)

    async def list_tags(
        self,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        search: str | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Tag], int]:
        with logfire.span("tag_service.list_tags", sort=sort.value, search=search):
            tags = await self.tag_repository.find_all(
                sort=sort, search=search, limit=limit, offset=offset
            )
            total = await self.tag_repository.count(search=search)
            return tags, total

    async def popular(self, limit: int = 10) -> list[Tag]:
        return await self.tag_repository.find_all(sort=TagSortOrder.POPULAR, limit=limit)

    async def search(self, query: str, limit: int = 10) -> list[Tag]:
        return await self.tag_repository.find_all(
            sort=TagSortOrder.POPULAR, search=query.strip().lower(), limit=limit
        )

    async def create(
        self,
        name: str,
        created_by: UserId,
        description: str | None = None,
        color: str | None = None,
    ) -> Tag:
        """Create a tag explicitly.

        Raises:
            BusinessRuleViolationError: If an undeleted tag with the name exists
        """
        tag_name = self.parse_name(name)
        with logfire.span("tag_service.create", tag_name=tag_name.root):
            if await self.tag_repository.find_by_name(tag_name):
                logfire.warn("Duplicate tag name", tag_name=tag_name.root)
                raise BusinessRuleViolationError("Tag already exists")

            tag = Tag(id=TagId(uuid4()), name=tag_name, created_by=created_by)
            if description is not None or color is not None:
                tag = tag.edit(description=description, color=color)
            saved = await self.tag_repository.save(tag)
            logfire.info("Tag created", tag_id=str(saved.id), tag_name=tag_name.root)
            return saved

    async def update(
        self, tag: Tag, description: str | None = None, color: str | None = None
    ) -> Tag:
        with logfire.span("tag_service.update", tag_id=str(tag.id)):
            return await self.tag_repository.save(
                tag.edit(description=description, color=color)
            )

    async def delete(self, tag: Tag) -> None:
        """Soft-delete a tag that no question uses.

        Raises:
            BusinessRuleViolationError: If undeleted questions still use the tag
        """
        with logfire.span("tag_service.delete", tag_id=str(tag.id)):
            in_use = await self.question_repository.count_by_tag(tag.id)
            if in_use > 0:
                logfire.warn("Delete of tag in use", tag_id=str(tag.id), questions=in_use)
                raise BusinessRuleViolationError(
                    f"Cannot delete tag. It is being used by {in_use} questions."
                )
            await self.tag_repository.save(tag.soft_delete())
            logfire.info("Tag deleted", tag_id=str(tag.id))

    async def set_official(self, tag: Tag, official: bool) -> Tag:
        with logfire.span("tag_service.set_official", tag_id=str(tag.id), official=official):
            return await self.tag_repository.save(tag.set_official(official))
