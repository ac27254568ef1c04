"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import AliasChoices, BaseModel, Field

from askit.application.assembly import AnswerView, QuestionView, VoteView
from askit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from askit.application.usecase.question import (
    CloseQuestionRequest,
    CloseQuestionUseCase,
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
    VoteQuestionRequest,
    VoteQuestionUseCase,
)
from askit.domain.repository.answer import AnswerSortOrder
from askit.domain.repository.question import QuestionSortOrder
from askit.domain.service import AuthService
from askit.domain.value import VoteType
from askit.interface.api.envelope import ApiResponse, ok
from askit.interface.api.security import optional_user, require_user

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    tags: list[str] = Field(min_length=1, max_length=5)


class UpdateQuestionAPIRequest(BaseModel):
    title: str | None = Field(default=None, min_length=10, max_length=200)
    description: str | None = Field(default=None, min_length=20)
    tags: list[str] | None = Field(default=None, min_length=1, max_length=5)


class VoteAPIRequest(BaseModel):
    """Vote body, shared with the answer routes."""

    vote_type: VoteType = Field(validation_alias=AliasChoices("vote_type", "voteType"))


class CloseQuestionAPIRequest(BaseModel):
    is_closed: bool = Field(validation_alias=AliasChoices("is_closed", "isClosed"))


class CreateAnswerAPIRequest(BaseModel):
    content: str = Field(min_length=10, max_length=10000)


@router.get("", response_model=ApiResponse[ListQuestionsResponse])
async def list_questions(
    request: Request,
    use_case: FromDishka[ListQuestionsUseCase],
    auth_service: FromDishka[AuthService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    tag: str | None = None,
    search: str | None = None,
    author: str | None = None,
    answered: bool | None = None,
) -> ApiResponse[ListQuestionsResponse]:
    """List questions with filtering, sorting and paging.

    Args:
        sort: newest, oldest, votes, views or activity
        tag: Only questions carrying this tag name
        search: Case-insensitive match on title or description
        author: Only questions by this username
        answered: Only questions with (true) or without (false) an accepted answer
    """
    viewer = await optional_user(request, auth_service)
    result = await use_case.execute(
        ListQuestionsRequest(
            page=page,
            limit=limit,
            sort=sort,
            tag=tag,
            search=search,
            author=author,
            answered=answered,
            viewer_id=str(viewer.id) if viewer else None,
        )
    )
    return ok(result)


@router.get("/search", response_model=ApiResponse[ListQuestionsResponse])
async def search_questions(
    request: Request,
    use_case: FromDishka[ListQuestionsUseCase],
    auth_service: FromDishka[AuthService],
    q: str = Query(min_length=1),
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    tag: str | None = None,
) -> ApiResponse[ListQuestionsResponse]:
    """Full-text search over question titles and descriptions."""
    viewer = await optional_user(request, auth_service)
    result = await use_case.execute(
        ListQuestionsRequest(
            page=page,
            limit=limit,
            sort=sort,
            tag=tag,
            search=q,
            viewer_id=str(viewer.id) if viewer else None,
        )
    )
    return ok(result)


@router.get("/{question_id}", response_model=ApiResponse[GetQuestionResponse])
async def get_question(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[GetQuestionUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[GetQuestionResponse]:
    """Get a question with its answers. Counts as a view."""
    viewer = await optional_user(request, auth_service)
    result = await use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id), viewer_id=str(viewer.id) if viewer else None
        )
    )
    return ok(result)


@router.post(
    "",
    response_model=ApiResponse[QuestionView],
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    body: CreateQuestionAPIRequest,
    request: Request,
    use_case: FromDishka[CreateQuestionUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[QuestionView]:
    """Ask a question. Unknown tags are created on the fly."""
    actor = await require_user(request, auth_service)
    question = await use_case.execute(
        CreateQuestionRequest(
            actor=actor, title=body.title, description=body.description, tags=body.tags
        )
    )
    return ok(question, "Question created successfully")


@router.put("/{question_id}", response_model=ApiResponse[QuestionView])
async def update_question(
    question_id: UUID,
    body: UpdateQuestionAPIRequest,
    request: Request,
    use_case: FromDishka[UpdateQuestionUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[QuestionView]:
    actor = await require_user(request, auth_service)
    question = await use_case.execute(
        UpdateQuestionRequest(
            actor=actor,
            question_id=str(question_id),
            title=body.title,
            description=body.description,
            tags=body.tags,
        )
    )
    return ok(question, "Question updated successfully")


@router.delete("/{question_id}", response_model=ApiResponse[None])
async def delete_question(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[DeleteQuestionUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[None]:
    actor = await require_user(request, auth_service)
    await use_case.execute(DeleteQuestionRequest(actor=actor, question_id=str(question_id)))
    return ok(message="Question deleted successfully")


@router.post("/{question_id}/vote", response_model=ApiResponse[VoteView])
async def vote_question(
    question_id: UUID,
    body: VoteAPIRequest,
    request: Request,
    use_case: FromDishka[VoteQuestionUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[VoteView]:
    """Vote on a question. Repeating the same vote retracts it."""
    actor = await require_user(request, auth_service)
    result = await use_case.execute(
        VoteQuestionRequest(actor=actor, question_id=str(question_id), vote_type=body.vote_type)
    )
    return ok(result, "Vote recorded")


@router.put("/{question_id}/close", response_model=ApiResponse[QuestionView])
async def close_question(
    question_id: UUID,
    body: CloseQuestionAPIRequest,
    request: Request,
    use_case: FromDishka[CloseQuestionUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[QuestionView]:
    actor = await require_user(request, auth_service)
    question = await use_case.execute(
        CloseQuestionRequest(actor=actor, question_id=str(question_id), is_closed=body.is_closed)
    )
    message = "Question closed" if question.is_closed else "Question reopened"
    return ok(question, message)


@router.get("/{question_id}/answers", response_model=ApiResponse[ListAnswersResponse])
async def list_answers(
    question_id: UUID,
    request: Request,
    use_case: FromDishka[ListAnswersUseCase],
    auth_service: FromDishka[AuthService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    sort: AnswerSortOrder = AnswerSortOrder.VOTES,
) -> ApiResponse[ListAnswersResponse]:
    """List a question's answers; the accepted answer always comes first."""
    viewer = await optional_user(request, auth_service)
    result = await use_case.execute(
        ListAnswersRequest(
            question_id=str(question_id),
            page=page,
            limit=limit,
            sort=sort,
            viewer_id=str(viewer.id) if viewer else None,
        )
    )
    return ok(result)


@router.post(
    "/{question_id}/answers",
    response_model=ApiResponse[AnswerView],
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    body: CreateAnswerAPIRequest,
    request: Request,
    use_case: FromDishka[CreateAnswerUseCase],
    auth_service: FromDishka[AuthService],
) -> ApiResponse[AnswerView]:
    actor = await require_user(request, auth_service)
    answer = await use_case.execute(
        CreateAnswerRequest(actor=actor, question_id=str(question_id), content=body.content)
    )
    return ok(answer, "Answer posted successfully")
