"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem
from qna.domain.service import AnswerService, UserService
from qna.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    content: str
    user_id: str  # User ID from authenticated user


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service (author display fields)
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerItem:
        """Execute create answer flow.

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the question does not exist
        """
        author_id = UserId(UUID(request.user_id))
        answer = await self.answer_service.create_answer(
            question_id=QuestionId(UUID(request.question_id)),
            author_id=author_id,
            content=request.content,
        )
        authors = await self.user_service.get_authors([author_id])
        return AnswerItem.build(answer, authors[author_id])
