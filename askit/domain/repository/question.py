"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from askit.domain.model.question import Question
from askit.domain.value import QuestionId, TagId, UserId, VoteType


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # vote count DESC
    VIEWS = "views"  # views DESC
    ACTIVITY = "activity"  # last_activity DESC


class QuestionFilter(BaseModel):
    """Filters for question listings. Unset fields do not filter."""

    tag_id: Optional[TagId] = None
    author_id: Optional[UserId] = None
    search: Optional[str] = None  # Case-insensitive substring of title or description
    answered: Optional[bool] = None  # True: has an accepted answer


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Soft-deleted questions are excluded from every read unless
    ``include_deleted`` is passed.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, include_deleted: bool = False
    ) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier
            include_deleted: Whether to return a soft-deleted question

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: Optional[QuestionFilter] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            filters: Listing filters
            sort: Sort order
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, filters: Optional[QuestionFilter] = None) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Updates never touch the vote sets; those change only through
        ``set_vote``.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def set_vote(
        self, question_id: QuestionId, user_id: UserId, vote: Optional[VoteType]
    ) -> Optional[Question]:
        """Atomically set one user's vote and bump ``last_activity``.

        Removes the user from both vote sets and adds them to the set for
        ``vote`` (if any) in a single store-level update, so concurrent votes
        from different users commute.

        Args:
            question_id: The question ID
            user_id: The voter
            vote: The voter's resulting vote, None to retract

        Returns:
            The updated question, or None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add ``delta`` to the answer counter (never below 0).

        Also bumps ``last_activity``.
        """
        pass

    @abstractmethod
    async def count_by_tag(self, tag_id: TagId) -> int:
        """Count undeleted questions that reference a tag."""
        pass

    @abstractmethod
    async def sum_votes_by_author(self, author_id: UserId) -> int:
        """Total votes (up plus down) cast on an author's undeleted questions."""
        pass
