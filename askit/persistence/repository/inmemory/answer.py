"""In-memory answer repository for testing."""

from typing import List, Optional, Sequence

from askit.domain.model.answer import Answer, Comment
from askit.domain.repository.answer import AnswerRepository, AnswerSortOrder
from askit.domain.value import AnswerId, QuestionId, UserId, VoteType

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _answers(self) -> dict[AnswerId, Answer]:
        return self._store.answers

    def _active(self) -> list[Answer]:
        return [a for a in self._answers.values() if not a.is_deleted]

    async def find_by_id(
        self, answer_id: AnswerId, include_deleted: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID."""
        answer = self._answers.get(answer_id)
        if answer is None or (answer.is_deleted and not include_deleted):
            return None
        return answer

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        answers = [a for a in self._active() if a.question_id == question_id]

        if sort == AnswerSortOrder.VOTES:
            # Accepted first, then by votes, then oldest first
            answers.sort(
                key=lambda a: (not a.is_accepted, -a.vote_count, a.created_at)
            )
        elif sort == AnswerSortOrder.NEWEST:
            answers.sort(key=lambda a: a.created_at, reverse=True)
        elif sort == AnswerSortOrder.OLDEST:
            answers.sort(key=lambda a: a.created_at)

        end = None if limit is None else offset + limit
        return answers[offset:end]

    async def count_by_question(self, question_id: QuestionId) -> int:
        return sum(1 for a in self._active() if a.question_id == question_id)

    async def find_by_author_and_question(
        self, author_id: UserId, question_id: QuestionId
    ) -> Optional[Answer]:
        return next(
            (
                a
                for a in self._active()
                if a.author_id == author_id and a.question_id == question_id
            ),
            None,
        )

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        answers = [a for a in self._active() if a.author_id == author_id]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        return sum(
            1
            for a in self._active()
            if a.author_id == author_id and (a.is_accepted or not accepted_only)
        )

    async def sum_votes_by_author(self, author_id: UserId) -> int:
        return sum(a.votes.total for a in self._active() if a.author_id == author_id)

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer.

        An update keeps the stored votes, accepted flag and comments.
        """
        existing = self._answers.get(answer.id)
        if existing is not None:
            answer = answer.model_copy(
                update={
                    "votes": existing.votes,
                    "is_accepted": existing.is_accepted,
                    "comments": existing.comments,
                }
            )
        self._answers[answer.id] = answer
        return answer

    async def set_vote(
        self, answer_id: AnswerId, user_id: UserId, vote: Optional[VoteType]
    ) -> Optional[Answer]:
        answer = await self.find_by_id(answer_id)
        if answer is None:
            return None
        updated = answer.model_copy(
            update={"votes": answer.votes.with_vote(user_id, vote)}
        )
        self._answers[answer_id] = updated
        return updated

    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.set_accepted(accepted)

    async def clear_accepted(self, question_id: QuestionId) -> int:
        changed = 0
        for answer in list(self._answers.values()):
            if answer.question_id == question_id and answer.is_accepted:
                self._answers[answer.id] = answer.set_accepted(False)
                changed += 1
        return changed

    async def update_comments(
        self, answer_id: AnswerId, comments: Sequence[Comment]
    ) -> None:
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={"comments": tuple(comments)}
            )
