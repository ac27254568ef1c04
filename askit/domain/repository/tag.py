"""Tag repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from askit.domain.model.tag import Tag
from askit.domain.value import TagId, TagName


class TagSortOrder(str, Enum):
    """Sort order for tag listings."""

    POPULAR = "popular"  # question_count DESC, then name
    NAME = "name"
    NEWEST = "newest"
    OLDEST = "oldest"


class TagRepository(ABC):
    """Repository for Tag entity.

    Soft-deleted tags are excluded from every read.
    """

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find a tag by ID.

        Args:
            tag_id: The tag's unique identifier

        Returns:
            The tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> List[Tag]:
        """Find several tags in one query (order not guaranteed)."""
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by its unique name.

        Args:
            name: The tag name

        Returns:
            The tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Tag]:
        """List tags.

        Args:
            sort: Sort order
            search: Case-insensitive substring matched against name and description
            limit: Maximum number of tags to return
            offset: Number of tags to skip

        Returns:
            Matching tags
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count tags matching ``search``."""
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save a tag (create or update).

        Updates never touch ``question_count``; use ``adjust_question_count``.

        Args:
            tag: The tag to save

        Returns:
            The saved tag
        """
        pass

    @abstractmethod
    async def adjust_question_count(self, tag_ids: Sequence[TagId], delta: int) -> None:
        """Atomically add ``delta`` to each tag's usage counter.

        Uses a SQL-level increment to avoid lost updates. The counter is
        floored at zero.

        Args:
            tag_ids: Tags to adjust
            delta: Amount to add (negative to decrement)
        """
        pass
