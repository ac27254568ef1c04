"""PostgreSQL implementation of Tag repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import asc, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from askit.domain.model.tag import Tag
from askit.domain.repository.tag import TagRepository, TagSortOrder
from askit.domain.value import TagId, TagName
from askit.persistence.mappers import row_to_tag, tag_to_dict
from askit.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filters(self, stmt, search: Optional[str]):
        stmt = stmt.where(tags_table.c.is_deleted.is_(False))
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    tags_table.c.name.ilike(pattern),
                    tags_table.c.description.ilike(pattern),
                )
            )
        return stmt

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find a tag by ID."""
        stmt = select(tags_table).where(
            tags_table.c.id == tag_id, tags_table.c.is_deleted.is_(False)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: Sequence[TagId]) -> List[Tag]:
        """Find several tags in one query."""
        if not tag_ids:
            return []
        stmt = select(tags_table).where(
            tags_table.c.id.in_(set(tag_ids)), tags_table.c.is_deleted.is_(False)
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find a tag by name."""
        stmt = select(tags_table).where(
            tags_table.c.name == name.root, tags_table.c.is_deleted.is_(False)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_all(
        self,
        sort: TagSortOrder = TagSortOrder.POPULAR,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Tag]:
        """List tags with filtering and pagination."""
        with logfire.span(
            "tag_repository.find_all", sort=sort.value, search=search, limit=limit
        ):
            stmt = self._apply_filters(select(tags_table), search)

            if sort == TagSortOrder.POPULAR:
                stmt = stmt.order_by(
                    desc(tags_table.c.question_count), asc(tags_table.c.name)
                )
            elif sort == TagSortOrder.NAME:
                stmt = stmt.order_by(asc(tags_table.c.name))
            elif sort == TagSortOrder.NEWEST:
                stmt = stmt.order_by(desc(tags_table.c.created_at))
            elif sort == TagSortOrder.OLDEST:
                stmt = stmt.order_by(asc(tags_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def count(self, search: Optional[str] = None) -> int:
        stmt = self._apply_filters(select(func.count()).select_from(tags_table), search)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, tag: Tag) -> Tag:
        """Save a tag (create or update)."""
        tag_dict = tag_to_dict(tag)
        stmt = insert(tags_table).values(**tag_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[tags_table.c.id],
            set_={
                k: v
                for k, v in tag_dict.items()
                if k not in ("id", "created_at", "question_count")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    async def adjust_question_count(self, tag_ids: Sequence[TagId], delta: int) -> None:
        """Atomically adjust usage counters (minimum 0)."""
        if not tag_ids or delta == 0:
            return
        stmt = (
            update(tags_table)
            .where(tags_table.c.id.in_(set(tag_ids)))
            .values(
                question_count=func.greatest(tags_table.c.question_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
