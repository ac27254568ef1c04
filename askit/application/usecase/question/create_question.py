"""Create question use case."""

from pydantic import BaseModel, Field

from askit.application.assembly import QuestionView, ViewAssembler
from askit.domain.model import User
from askit.domain.service import PermissionService, QuestionService


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    actor: User
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    tags: list[str] = Field(min_length=1, max_length=5)


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self,
        question_service: QuestionService,
        permission_service: PermissionService,
        assembler: ViewAssembler,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            permission_service: Permission domain service
            assembler: View assembler
        """
        self.question_service = question_service
        self.permission_service = permission_service
        self.assembler = assembler

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Execute create question flow.

        Steps:
        1. Check the author is not banned
        2. Find or create the tags and save the question
        3. Bump the usage counter of every tag

        Raises:
            ForbiddenError: If the author is banned
            ValidationError: If a tag name is invalid
        """
        self.permission_service.ensure_active(request.actor)
        question = await self.question_service.create(
            request.actor, request.title, request.description, request.tags
        )
        return await self.assembler.question(question, request.actor.id)
