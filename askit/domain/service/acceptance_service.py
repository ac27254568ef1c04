"""Accepted-answer state machine."""

from dataclasses import dataclass

import logfire

from askit.domain.error import NotAuthorizedError, NotFoundError
from askit.domain.model import User
from askit.domain.repository import AnswerRepository, QuestionRepository
from askit.domain.value import AnswerId, NotificationPayload, NotificationType, QuestionId

from .base import Service
from .notification_service import NotificationDispatcher


@dataclass
class AcceptanceResult:
    """Outcome of toggling acceptance on an answer."""

    answer_id: AnswerId
    question_id: QuestionId
    is_accepted: bool


class AcceptanceService(Service):
    """Domain service for accepting and unaccepting answers.

    A question is either without an accepted answer or points at exactly one.
    Accepting an answer sweeps every other accepted answer of the question
    first, so the flag is never set on two answers at once.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.dispatcher = dispatcher

    async def toggle_accept(self, answer_id: AnswerId, actor: User) -> AcceptanceResult:
        """Accept an answer, or unaccept it if it is already accepted.

        Args:
            answer_id: Answer ID
            actor: User performing the action

        Returns:
            The answer's resulting acceptance state

        Raises:
            NotFoundError: If the answer or its question is missing or deleted
            NotAuthorizedError: If the actor is neither the question author nor an admin
        """
        with logfire.span(
            "acceptance_service.toggle_accept",
            answer_id=str(answer_id),
            user_id=str(actor.id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if not question:
                raise NotFoundError("Question", str(answer.question_id))

            if not (question.is_owned_by(actor.id) or actor.is_admin):
                logfire.warn(
                    "Accept attempt by non-owner",
                    question_id=str(question.id),
                    user_id=str(actor.id),
                )
                raise NotAuthorizedError("question", str(question.id), str(actor.id))

            if answer.is_accepted:
                await self.answer_repository.set_accepted(answer_id, False)
                await self.question_repository.save(question.clear_accepted())
                logfire.info(
                    "Answer unaccepted",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                )
                return AcceptanceResult(
                    answer_id=answer_id, question_id=question.id, is_accepted=False
                )

            cleared = await self.answer_repository.clear_accepted(question.id)
            await self.answer_repository.set_accepted(answer_id, True)
            await self.question_repository.save(question.accept(answer_id))
            logfire.info(
                "Answer accepted",
                answer_id=str(answer_id),
                question_id=str(question.id),
                previously_accepted=cleared,
            )

            if not answer.is_owned_by(actor.id):
                await self.dispatcher.notify(
                    answer.author_id,
                    NotificationType.ANSWER_ACCEPTED,
                    "Your answer was accepted",
                    f"{actor.username} accepted your answer",
                    NotificationPayload(
                        question_id=str(question.id),
                        answer_id=str(answer_id),
                        user_id=str(actor.id),
                    ),
                )

            return AcceptanceResult(
                answer_id=answer_id, question_id=question.id, is_accepted=True
            )
