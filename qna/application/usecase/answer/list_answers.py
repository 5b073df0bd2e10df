"""List answers use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem
from qna.domain.service import AggregationService, AnswerService, UserService
from qna.domain.value import QuestionId, VotableType


class ListAnswersRequest(BaseModel):
    question_id: str  # UUID string


class ListAnswersResponse(BaseModel):
    answers: list[AnswerItem]


class ListAnswersUseCase:
    """Use case for listing a question's answers, oldest first."""

    def __init__(
        self,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        self.answer_service = answer_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        answers = await self.answer_service.list_answers(QuestionId(UUID(request.question_id)))
        answers = await self.aggregation_service.attach_votes(VotableType.ANSWER, answers)
        authors = await self.user_service.get_authors([a.author_id for a in answers])
        return ListAnswersResponse(
            answers=[AnswerItem.build(a, authors[a.author_id]) for a in answers]
        )
