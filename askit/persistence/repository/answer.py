"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askit.domain.model import Answer, Comment
from askit.domain.repository.answer import AnswerRepository, AnswerSortOrder
from askit.domain.value import AnswerId, QuestionId, UserId, VoteType
from askit.persistence.mappers import answer_to_dict, comments_to_json, row_to_answer
from askit.persistence.repository.votes import (
    vote_count_expression,
    vote_membership_values,
    vote_total_expression,
)
from askit.persistence.tables import answers_table

# Columns with dedicated update paths
_IMMUTABLE_ON_UPDATE = {
    "id",
    "created_at",
    "upvoters",
    "downvoters",
    "is_accepted",
    "comments",
}


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_active(self):
        return select(answers_table).where(answers_table.c.is_deleted.is_(False))

    async def find_by_id(
        self, answer_id: AnswerId, include_deleted: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if not include_deleted:
            stmt = stmt.where(answers_table.c.is_deleted.is_(False))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find the answers of a question."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
        ):
            stmt = self._select_active().where(
                answers_table.c.question_id == question_id
            )

            if sort == AnswerSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(answers_table.c.is_accepted),
                    desc(vote_count_expression(answers_table)),
                    asc(answers_table.c.created_at),
                )
            elif sort == AnswerSortOrder.NEWEST:
                stmt = stmt.order_by(desc(answers_table.c.created_at))
            elif sort == AnswerSortOrder.OLDEST:
                stmt = stmt.order_by(asc(answers_table.c.created_at))

            if limit is not None:
                stmt = stmt.limit(limit)
            stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.question_id == question_id,
                answers_table.c.is_deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author_and_question(
        self, author_id: UserId, question_id: QuestionId
    ) -> Optional[Answer]:
        stmt = self._select_active().where(
            answers_table.c.author_id == author_id,
            answers_table.c.question_id == question_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        stmt = (
            self._select_active()
            .where(answers_table.c.author_id == author_id)
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.is_deleted.is_(False),
            )
        )
        if accepted_only:
            stmt = stmt.where(answers_table.c.is_accepted.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def sum_votes_by_author(self, author_id: UserId) -> int:
        stmt = select(
            func.coalesce(func.sum(vote_total_expression(answers_table)), 0)
        ).where(
            answers_table.c.author_id == author_id,
            answers_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            answer_dict = answer_to_dict(answer)
            stmt = insert(answers_table).values(**answer_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[answers_table.c.id],
                set_={
                    k: v
                    for k, v in answer_dict.items()
                    if k not in _IMMUTABLE_ON_UPDATE
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def set_vote(
        self, answer_id: AnswerId, user_id: UserId, vote: Optional[VoteType]
    ) -> Optional[Answer]:
        """Atomically set one user's vote."""
        with logfire.span(
            "answer_repository.set_vote",
            answer_id=str(answer_id),
            user_id=str(user_id),
            vote=vote.value if vote else None,
        ):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer_id)
                .where(answers_table.c.is_deleted.is_(False))
                .values(**vote_membership_values(answers_table, user_id, vote))
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                logfire.warn("Answer not found or deleted", answer_id=str(answer_id))
                return None
            return row_to_answer(row._asdict())

    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=accepted)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def clear_accepted(self, question_id: QuestionId) -> int:
        """Sweep every accepted answer of a question back to not accepted."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .where(answers_table.c.is_accepted.is_(True))
            .values(is_accepted=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def update_comments(
        self, answer_id: AnswerId, comments: Sequence[Comment]
    ) -> None:
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(comments=comments_to_json(comments))
        )
        await self.session.execute(stmt)
        await self.session.flush()
