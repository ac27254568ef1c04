"""In-memory question repository for testing."""

from typing import List, Optional

from askit.domain.model.common import utcnow
from askit.domain.model.question import Question
from askit.domain.repository.question import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)
from askit.domain.value import QuestionId, TagId, UserId, VoteType

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _questions(self) -> dict[QuestionId, Question]:
        return self._store.questions

    def _filtered(self, filters: Optional[QuestionFilter]) -> list[Question]:
        questions = [q for q in self._questions.values() if not q.is_deleted]
        if filters is None:
            return questions

        if filters.tag_id is not None:
            questions = [q for q in questions if filters.tag_id in q.tag_ids]
        if filters.author_id is not None:
            questions = [q for q in questions if q.author_id == filters.author_id]
        if filters.search:
            needle = filters.search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.description.lower()
            ]
        if filters.answered is not None:
            questions = [
                q
                for q in questions
                if (q.accepted_answer_id is not None) == filters.answered
            ]
        return questions

    async def find_by_id(
        self, question_id: QuestionId, include_deleted: bool = False
    ) -> Optional[Question]:
        """Find a question by ID."""
        question = self._questions.get(question_id)
        if question is None or (question.is_deleted and not include_deleted):
            return None
        return question

    async def find_all(
        self,
        filters: Optional[QuestionFilter] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        questions = self._filtered(filters)

        if sort == QuestionSortOrder.NEWEST:
            questions.sort(key=lambda q: q.created_at, reverse=True)
        elif sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: (q.vote_count, q.created_at), reverse=True)
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: (q.views, q.created_at), reverse=True)
        elif sort == QuestionSortOrder.ACTIVITY:
            questions.sort(key=lambda q: q.last_activity, reverse=True)

        return questions[offset : offset + limit]

    async def count(self, filters: Optional[QuestionFilter] = None) -> int:
        return len(self._filtered(filters))

    async def save(self, question: Question) -> Question:
        """Save or update a question.

        Like the SQL implementation, an update keeps the stored vote sets,
        view counter and answer counter.
        """
        existing = self._questions.get(question.id)
        if existing is not None:
            question = question.model_copy(
                update={
                    "votes": existing.votes,
                    "views": existing.views,
                    "answer_count": existing.answer_count,
                }
            )
        self._questions[question.id] = question
        return question

    async def set_vote(
        self, question_id: QuestionId, user_id: UserId, vote: Optional[VoteType]
    ) -> Optional[Question]:
        question = await self.find_by_id(question_id)
        if question is None:
            return None
        updated = question.model_copy(
            update={
                "votes": question.votes.with_vote(user_id, vote),
                "last_activity": utcnow(),
            }
        )
        self._questions[question_id] = updated
        return updated

    async def increment_views(self, question_id: QuestionId) -> None:
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={
                    "answer_count": max(question.answer_count + delta, 0),
                    "last_activity": utcnow(),
                }
            )

    async def count_by_tag(self, tag_id: TagId) -> int:
        return len(self._filtered(QuestionFilter(tag_id=tag_id)))

    async def sum_votes_by_author(self, author_id: UserId) -> int:
        return sum(
            q.votes.total
            for q in self._filtered(QuestionFilter(author_id=author_id))
        )
