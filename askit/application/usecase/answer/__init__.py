"""Answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerResponse, AcceptAnswerUseCase
from .add_comment import AddCommentRequest, AddCommentUseCase
from .create_answer import CreateAnswerRequest, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .remove_comment import RemoveCommentRequest, RemoveCommentUseCase
from .update_answer import UpdateAnswerRequest, UpdateAnswerUseCase
from .vote_answer import VoteAnswerRequest, VoteAnswerUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "AddCommentRequest",
    "AddCommentUseCase",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
    "UpdateAnswerRequest",
    "UpdateAnswerUseCase",
    "VoteAnswerRequest",
    "VoteAnswerUseCase",
]
