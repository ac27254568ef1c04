"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askit.domain.model import Question
from askit.domain.repository.question import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)
from askit.domain.value import QuestionId, TagId, UserId, VoteType
from askit.persistence.mappers import question_to_dict, row_to_question
from askit.persistence.repository.votes import (
    vote_count_expression,
    vote_membership_values,
    vote_total_expression,
)
from askit.persistence.tables import questions_table

# Columns an update never rewrites from the entity
_IMMUTABLE_ON_UPDATE = {
    "id",
    "created_at",
    "upvoters",
    "downvoters",
    "views",
    "answer_count",
}


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filters(self, stmt, filters: Optional[QuestionFilter]):
        stmt = stmt.where(questions_table.c.is_deleted.is_(False))
        if filters is None:
            return stmt

        if filters.tag_id is not None:
            stmt = stmt.where(questions_table.c.tag_ids.contains([filters.tag_id]))
        if filters.author_id is not None:
            stmt = stmt.where(questions_table.c.author_id == filters.author_id)
        if filters.search:
            pattern = f"%{filters.search}%"
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern),
                    questions_table.c.description.ilike(pattern),
                )
            )
        if filters.answered is True:
            stmt = stmt.where(questions_table.c.accepted_answer_id.is_not(None))
        elif filters.answered is False:
            stmt = stmt.where(questions_table.c.accepted_answer_id.is_(None))
        return stmt

    async def find_by_id(
        self, question_id: QuestionId, include_deleted: bool = False
    ) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            if not include_deleted:
                stmt = stmt.where(questions_table.c.is_deleted.is_(False))
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None
            return row_to_question(row._asdict())

    async def find_all(
        self,
        filters: Optional[QuestionFilter] = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            filters=filters.model_dump(mode="json") if filters else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filters(select(questions_table), filters)

            if sort == QuestionSortOrder.NEWEST:
                stmt = stmt.order_by(desc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(asc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(vote_count_expression(questions_table)),
                    desc(questions_table.c.created_at),
                )
            elif sort == QuestionSortOrder.VIEWS:
                stmt = stmt.order_by(
                    desc(questions_table.c.views), desc(questions_table.c.created_at)
                )
            elif sort == QuestionSortOrder.ACTIVITY:
                stmt = stmt.order_by(desc(questions_table.c.last_activity))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, filters: Optional[QuestionFilter] = None) -> int:
        """Count questions matching the given filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(questions_table), filters
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            title=question.title,
        ):
            question_dict = question_to_dict(question)
            stmt = insert(questions_table).values(**question_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[questions_table.c.id],
                set_={
                    k: v
                    for k, v in question_dict.items()
                    if k not in _IMMUTABLE_ON_UPDATE
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def set_vote(
        self, question_id: QuestionId, user_id: UserId, vote: Optional[VoteType]
    ) -> Optional[Question]:
        """Atomically set one user's vote."""
        with logfire.span(
            "question_repository.set_vote",
            question_id=str(question_id),
            user_id=str(user_id),
            vote=vote.value if vote else None,
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .where(questions_table.c.is_deleted.is_(False))
                .values(
                    **vote_membership_values(questions_table, user_id, vote),
                    last_activity=func.now(),
                )
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                logfire.warn("Question not found or deleted", question_id=str(question_id))
                return None
            return row_to_question(row._asdict())

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically adjust the answer counter (minimum 0)."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=func.greatest(questions_table.c.answer_count + delta, 0),
                last_activity=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_tag(self, tag_id: TagId) -> int:
        return await self.count(QuestionFilter(tag_id=tag_id))

    async def sum_votes_by_author(self, author_id: UserId) -> int:
        stmt = select(
            func.coalesce(func.sum(vote_total_expression(questions_table)), 0)
        ).where(
            questions_table.c.author_id == author_id,
            questions_table.c.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
