"""Update question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import QuestionItem
from qna.domain.service import AggregationService, QuestionService, UserService
from qna.domain.value import QuestionId, UserId, VotableType


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields stay unchanged."""

    question_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None
    images: Optional[list[str]] = None


class UpdateQuestionUseCase:
    """Use case for editing a question (author only)."""

    def __init__(
        self,
        question_service: QuestionService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        self.question_service = question_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionItem:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If an edited field is invalid
        """
        question = await self.question_service.update_question(
            question_id=QuestionId(UUID(request.question_id)),
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
            tags=request.tags,
            images=request.images,
        )
        question = await self.aggregation_service.attach_votes_one(
            VotableType.QUESTION, question
        )
        counts = await self.aggregation_service.answer_counts([question.id])
        authors = await self.user_service.get_authors([question.author_id])
        return QuestionItem.build(question, authors[question.author_id], counts[question.id])
