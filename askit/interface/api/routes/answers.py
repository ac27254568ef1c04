"""Answer routes.

Listing and posting answers hang off the question routes; everything that
targets an existing answer lives here.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from askit.application.assembly import AnswerView, CommentView, VoteView
from askit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    AddCommentRequest,
    AddCommentUseCase,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
    VoteAnswerRequest,
    VoteAnswerUseCase,
)
from askit.domain.service import AuthService
from askit.interface.api.envelope import ApiResponse, ok
from askit.interface.api.routes.questions import VoteAPIRequest
from askit.interface.api.security import require_user

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    content: str = Field(min_length=10, max_length=10000)


class AddCommentAPIRequest(BaseModel):
    content: str = Field(min_length=2, max_length=1000)


@router.put("/{answer_id}", response_model=ApiResponse[AnswerView])
async def update_answer(
    answer_id: UUID,
    body: UpdateAnswerAPIRequest,
    request: Request,
    use_case: FromDishka[UpdateAnswerUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[AnswerView]:
    actor = await require_user(request, auth_service)
    answer = await use_case.execute(
        UpdateAnswerRequest(actor=actor, answer_id=str(answer_id), content=body.content)
    )
    return ok(answer, "Answer updated successfully")


@router.delete("/{answer_id}", response_model=ApiResponse[None])
async def delete_answer(
    answer_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteAnswerUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[None]:
    actor = await require_user(request, auth_service)
    await use_case.execute(DeleteAnswerRequest(actor=actor, answer_id=str(answer_id)))
    return ok(message="Answer deleted successfully")


@router.post("/{answer_id}/vote", response_model=ApiResponse[VoteView])
async def vote_answer(
    answer_id: UUID,
    body: VoteAPIRequest,
    request: Request,
    use_case: FromDishka[VoteAnswerUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[VoteView]:
    """Vote on an answer. Repeating the same vote retracts it."""
    actor = await require_user(request, auth_service)
    result = await use_case.execute(
        VoteAnswerRequest(actor=actor, answer_id=str(answer_id), vote_type=body.vote_type)
    )
    return ok(result, "Vote recorded")


@router.put("/{answer_id}/accept", response_model=ApiResponse[AcceptAnswerResponse])
async def accept_answer(
    answer_id: UUID,
    request: Request,
    use_case: FromDishka[AcceptAnswerUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[AcceptAnswerResponse]:
    """Toggle acceptance of an answer.

    Only the question author (or an admin) may accept. Accepting another
    answer of the same question moves the acceptance.
    """
    actor = await require_user(request, auth_service)
    result = await use_case.execute(AcceptAnswerRequest(actor=actor, answer_id=str(answer_id)))
    message = "Answer accepted" if result.is_accepted else "Answer unaccepted"
    return ok(result, message)


@router.post(
    "/{answer_id}/comments",
    response_model=ApiResponse[CommentView],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    answer_id: UUID,
    body: AddCommentAPIRequest,
    request: Request,
    use_case: FromDishka[AddCommentUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[CommentView]:
    actor = await require_user(request, auth_service)
    comment = await use_case.execute(
        AddCommentRequest(actor=actor, answer_id=str(answer_id), content=body.content)
    )
    return ok(comment, "Comment added successfully")


@router.delete("/{answer_id}/comments/{comment_id}", response_model=ApiResponse[None])
async def remove_comment(
    answer_id: UUID,
    comment_id: UUID,
    request: Request,
    use_case: FromDishka[RemoveCommentUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[None]:
    actor = await require_user(request, auth_service)
    await use_case.execute(
        RemoveCommentRequest(
            actor=actor, answer_id=str(answer_id), comment_id=str(comment_id)
        )
    )
    return ok(message="Comment removed successfully")
