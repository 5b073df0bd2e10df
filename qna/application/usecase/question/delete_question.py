"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.domain.service import QuestionService
from qna.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteQuestionResponse(BaseModel):
    message: str


class DeleteQuestionUseCase:
    """Use case for deleting a question with its answers, replies and comments."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), UserId(UUID(request.user_id))
        )
        return DeleteQuestionResponse(message="Question deleted successfully")
