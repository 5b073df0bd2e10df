"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from qna.application.usecase.common import QuestionItem
from qna.domain.service import QuestionService, UserService
from qna.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    content: str
    tags: list[str]
    images: list[str] = Field(default_factory=list)
    user_id: str  # User ID from authenticated user


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(self, question_service: QuestionService, user_service: UserService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service (author display fields)
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionItem:
        """Execute create question flow.

        Raises:
            ValidationError: If title, content or tags are invalid
        """
        author_id = UserId(UUID(request.user_id))
        question = await self.question_service.create_question(
            author_id=author_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
            images=request.images,
        )
        authors = await self.user_service.get_authors([author_id])
        return QuestionItem.build(question, authors[author_id])
