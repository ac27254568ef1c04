"""Answer domain service, including answer comments."""

from uuid import uuid4

import logfire

from askit.domain.error import BusinessRuleViolationError, NotFoundError
from askit.domain.model import Answer, Comment, Question, User
from askit.domain.repository import AnswerRepository, AnswerSortOrder, QuestionRepository
from askit.domain.value import (
    AnswerId,
    CommentId,
    NotificationPayload,
    NotificationType,
    QuestionId,
)

from .base import Service
from .notification_service import NotificationDispatcher


class AnswerService(Service):
    """Domain service for answers and the comments embedded in them."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        dispatcher: NotificationDispatcher,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository, for answer counters
            dispatcher: Notification dispatcher
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.dispatcher = dispatcher

    async def get(self, answer_id: AnswerId) -> Answer:
        """Get an undeleted answer.

        Raises:
            NotFoundError: If the answer doesn't exist or is deleted
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_for_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Answer], int]:
        with logfire.span(
            "answer_service.list_for_question",
            question_id=str(question_id),
            sort=sort.value,
        ):
            answers = await self.answer_repository.find_by_question(
                question_id, sort=sort, limit=limit, offset=offset
            )
            total = await self.answer_repository.count_by_question(question_id)
            return answers, total

    async def create(self, question: Question, author: User, content: str) -> Answer:
        """Answer a question.

        Args:
            question: The question being answered
            author: Answer author
            content: Answer body

        Returns:
            The saved answer

        Raises:
            BusinessRuleViolationError: If the question is closed or the user
                already answered it
        """
        with logfire.span(
            "answer_service.create",
            question_id=str(question.id),
            author_id=str(author.id),
        ):
            if question.is_closed:
                logfire.warn("Answer on closed question", question_id=str(question.id))
                raise BusinessRuleViolationError("Cannot answer a closed question")

            existing = await self.answer_repository.find_by_author_and_question(
                author.id, question.id
            )
            if existing:
                logfire.warn(
                    "Duplicate answer attempt",
                    question_id=str(question.id),
                    author_id=str(author.id),
                )
                raise BusinessRuleViolationError(
                    "You have already answered this question"
                )

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                author_id=author.id,
                content=content.strip(),
            )
            saved = await self.answer_repository.save(answer)
            await self.question_repository.adjust_answer_count(question.id, 1)

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question.id),
                author_id=str(author.id),
            )

            if not question.is_owned_by(author.id):
                await self.dispatcher.notify(
                    question.author_id,
                    NotificationType.QUESTION_ANSWERED,
                    "Your question received an answer",
                    f'{author.username} answered your question "{question.title}"',
                    NotificationPayload(
                        question_id=str(question.id),
                        answer_id=str(saved.id),
                        user_id=str(author.id),
                    ),
                )

            return saved

    async def update(self, answer: Answer, content: str) -> Answer:
        with logfire.span("answer_service.update", answer_id=str(answer.id)):
            return await self.answer_repository.save(answer.edit(content.strip()))

    async def delete(self, answer: Answer) -> None:
        """Soft-delete an answer.

        A deleted accepted answer leaves its question without an accepted answer.
        """
        with logfire.span("answer_service.delete", answer_id=str(answer.id)):
            await self.answer_repository.save(answer.soft_delete())
            await self.question_repository.adjust_answer_count(answer.question_id, -1)

            if answer.is_accepted:
                await self.answer_repository.set_accepted(answer.id, False)
                question = await self.question_repository.find_by_id(answer.question_id)
                if question and question.accepted_answer_id == answer.id:
                    await self.question_repository.save(question.clear_accepted())

            logfire.info(
                "Answer deleted",
                answer_id=str(answer.id),
                question_id=str(answer.question_id),
            )

    async def add_comment(self, answer: Answer, author: User, content: str) -> Comment:
        """Attach a comment to an answer and notify the answer author.

        Returns:
            The new comment
        """
        with logfire.span(
            "answer_service.add_comment",
            answer_id=str(answer.id),
            author_id=str(author.id),
        ):
            comment = Comment(
                id=CommentId(uuid4()), content=content.strip(), author_id=author.id
            )
            updated = answer.add_comment(comment)
            await self.answer_repository.update_comments(answer.id, updated.comments)

            logfire.info(
                "Comment added", answer_id=str(answer.id), comment_id=str(comment.id)
            )

            if not answer.is_owned_by(author.id):
                await self.dispatcher.notify(
                    answer.author_id,
                    NotificationType.COMMENT_ADDED,
                    "New comment on your answer",
                    f"{author.username} commented on your answer",
                    NotificationPayload(
                        question_id=str(answer.question_id),
                        answer_id=str(answer.id),
                        comment_id=str(comment.id),
                        user_id=str(author.id),
                    ),
                )

            return comment

    def get_comment(self, answer: Answer, comment_id: CommentId) -> Comment:
        comment = answer.find_comment(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def remove_comment(self, answer: Answer, comment_id: CommentId) -> None:
        with logfire.span(
            "answer_service.remove_comment",
            answer_id=str(answer.id),
            comment_id=str(comment_id),
        ):
            self.get_comment(answer, comment_id)
            updated = answer.remove_comment(comment_id)
            await self.answer_repository.update_comments(answer.id, updated.comments)
            logfire.info(
                "Comment removed", answer_id=str(answer.id), comment_id=str(comment_id)
            )
