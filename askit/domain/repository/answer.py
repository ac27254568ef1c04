"""Answer repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from askit.domain.model.answer import Answer, Comment
from askit.domain.value import AnswerId, QuestionId, UserId, VoteType


class AnswerSortOrder(str, Enum):
    """Sort order for answers of a question."""

    VOTES = "votes"  # Accepted first, then vote count DESC, then oldest first
    NEWEST = "newest"
    OLDEST = "oldest"


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Comments are embedded in the answer and persisted with it.
    Soft-deleted answers are excluded from every read by default.
    """

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, include_deleted: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            include_deleted: Whether to return a soft-deleted answer

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find the answers of a question.

        Args:
            question_id: The question ID
            sort: Sort order
            limit: Maximum number of answers (None for all)
            offset: Number of answers to skip

        Returns:
            Answers of the question
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count undeleted answers of a question."""
        pass

    @abstractmethod
    async def find_by_author_and_question(
        self, author_id: UserId, question_id: QuestionId
    ) -> Optional[Answer]:
        """Find a user's undeleted answer to a question, if any."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        """Find an author's answers, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        """Count an author's undeleted answers.

        Args:
            author_id: The author
            accepted_only: Only count accepted answers
        """
        pass

    @abstractmethod
    async def sum_votes_by_author(self, author_id: UserId) -> int:
        """Total votes (up plus down) cast on an author's undeleted answers."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Updates never touch the vote sets, the accepted flag or the comments;
        those have dedicated operations.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def set_vote(
        self, answer_id: AnswerId, user_id: UserId, vote: Optional[VoteType]
    ) -> Optional[Answer]:
        """Atomically set one user's vote (see ``QuestionRepository.set_vote``).

        Returns:
            The updated answer, or None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        """Set the accepted flag of one answer."""
        pass

    @abstractmethod
    async def clear_accepted(self, question_id: QuestionId) -> int:
        """Mark every accepted answer of a question as not accepted.

        Returns:
            Number of answers changed
        """
        pass

    @abstractmethod
    async def update_comments(
        self, answer_id: AnswerId, comments: Sequence[Comment]
    ) -> None:
        """Replace the embedded comment list of an answer."""
        pass
