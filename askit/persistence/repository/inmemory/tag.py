"""In-memory implementation of Tag repository for testing."""

from typing import List, Optional, Sequence

from askit.domain.model.tag import Tag
from askit.domain.repository.tag import TagRepository, TagSortOrder
from askit.domain.value import TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        """Initialize repository over a (possibly shared) store."""
        self._store = store or InMemoryStore()

    @property
    def _tags(self) -> dict[TagId, Tag]:
        return self._store.tags

    def _filtered(self, search: Optional[str]) -> list[Tag]:
        tags = [t for t in self._tags.values() if not t.is_deleted]
        if search:
            needle = search.lower()
            tags = [
                t
                for t in tags
                if needle in t.name.root or needle in t.description.lower()
            ]
        return tags

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        tag = self._tags.get(tag_id)
        return tag if tag and not tag.is_deleted else None

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> List[Tag]:
        wanted = set(tag_ids)
        return [t for t in self._filtered(None) if t.id in wanted]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return next((t for t in self._filtered(None) if t.name == name), None)

    async def find_all(
        self,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Tag]:
        tags = self._filtered(search)

        if sort == TagSortOrder.POPULAR:
            tags.sort(key=lambda t: (-t.question_count, t.name.root))
        elif sort == TagSortOrder.NAME:
            tags.sort(key=lambda t: t.name.root)
        elif sort == TagSortOrder.NEWEST:
            tags.sort(key=lambda t: t.created_at, reverse=True)
        elif sort == TagSortOrder.OLDEST:
            tags.sort(key=lambda t: t.created_at)

        return tags[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        return len(self._filtered(search))

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag (the stored usage counter wins on update)."""
        existing = self._tags.get(tag.id)
        if existing is not None:
            tag = tag.model_copy(update={"question_count": existing.question_count})
        self._tags[tag.id] = tag
        return tag

    async def adjust_question_count(self, tag_ids: Sequence[TagId], delta: int) -> None:
        for tag_id in set(tag_ids):
            tag = self._tags.get(tag_id)
            if tag:
                self._tags[tag_id] = tag.model_copy(
                    update={"question_count": max(tag.question_count + delta, 0)}
                )
