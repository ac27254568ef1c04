"""Question use cases."""

from .close_question import CloseQuestionRequest, CloseQuestionUseCase
from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase
from .vote_question import VoteQuestionRequest, VoteQuestionUseCase

__all__ = [
    "CloseQuestionRequest",
    "CloseQuestionUseCase",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
    "VoteQuestionRequest",
    "VoteQuestionUseCase",
]
