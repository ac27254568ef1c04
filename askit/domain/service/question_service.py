"""Question domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from askit.domain.error import NotFoundError
from askit.domain.model import Question, User
from askit.domain.repository import QuestionFilter, QuestionRepository, QuestionSortOrder
from askit.domain.value import QuestionId

from .base import Service
from .tag_service import TagService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag service, for tag resolution and usage counters
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    async def get(self, question_id: QuestionId) -> Question:
        """Get an undeleted question.

        Raises:
            NotFoundError: If the question doesn't exist or is deleted
        """
        with logfire.span("question_service.get", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def view(self, question_id: QuestionId) -> Question:
        """Get a question and count the view."""
        with logfire.span("question_service.view", question_id=str(question_id)):
            await self.get(question_id)
            await self.question_repository.increment_views(question_id)
            return await self.get(question_id)

    async def list_questions(
        self,
        filters: QuestionFilter | None = None,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        with logfire.span(
            "question_service.list_questions", sort=sort.value, limit=limit, offset=offset
        ):
            questions = await self.question_repository.find_all(
                filters=filters, sort=sort, limit=limit, offset=offset
            )
            total = await self.question_repository.count(filters=filters)
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def create(
        self, author: User, title: str, description: str, tag_names: Sequence[str]
    ) -> Question:
        """Create a question, creating unknown tags on the way.

        Args:
            author: Question author
            title: Question title
            description: Question body
            tag_names: One to five tag names

        Returns:
            The saved question
        """
        with logfire.span("question_service.create", author_id=str(author.id)):
            tags = await self.tag_service.resolve_tags(tag_names, author.id)
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                description=description.strip(),
                author_id=author.id,
                tag_ids=[tag.id for tag in tags],
            )
            saved = await self.question_repository.save(question)
            await self.tag_service.increment_usage(saved.tag_ids)

            logfire.info(
                "Question created",
                question_id=str(saved.id),
                author_id=str(author.id),
                tags=[tag.name.root for tag in tags],
            )
            return saved

    async def update(
        self,
        question: Question,
        editor: User,
        title: str | None = None,
        description: str | None = None,
        tag_names: Sequence[str] | None = None,
    ) -> Question:
        """Edit a question and rebalance tag counters when its tags change."""
        with logfire.span("question_service.update", question_id=str(question.id)):
            tag_ids = None
            if tag_names is not None:
                tags = await self.tag_service.resolve_tags(tag_names, editor.id)
                tag_ids = [tag.id for tag in tags]

            updated = question.edit(
                title=title.strip() if title is not None else None,
                description=description.strip() if description is not None else None,
                tag_ids=tag_ids,
            )
            saved = await self.question_repository.save(updated)

            if tag_ids is not None:
                await self.tag_service.rebalance_usage(question.tag_ids, tag_ids)

            logfire.info("Question updated", question_id=str(question.id))
            return saved

    async def delete(self, question: Question) -> None:
        """Soft-delete a question and release its tags."""
        with logfire.span("question_service.delete", question_id=str(question.id)):
            await self.question_repository.save(question.soft_delete())
            await self.tag_service.decrement_usage(question.tag_ids)
            logfire.info("Question deleted", question_id=str(question.id))

    async def set_closed(self, question: Question, closed: bool) -> Question:
        with logfire.span(
            "question_service.set_closed", question_id=str(question.id), closed=closed
        ):
            saved = await self.question_repository.save(question.set_closed(closed))
            logfire.info(
                "Question closed" if closed else "Question reopened",
                question_id=str(question.id),
            )
            return saved
