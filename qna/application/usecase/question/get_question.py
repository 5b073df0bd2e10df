"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem, QuestionItem
from qna.domain.service import AggregationService, AnswerService, QuestionService, UserService
from qna.domain.value import QuestionId, VotableType


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string


class GetQuestionResponse(BaseModel):
    """Question with its ranked answers."""

    question: QuestionItem
    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for opening a question page.

    Counts a view, then returns the question with its answers ranked
    accepted first and by vote count.
    """

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.view_question(question_id)
        question = await self.aggregation_service.attach_votes_one(
            VotableType.QUESTION, question
        )

        answers = await self.answer_service.list_answers(question_id)
        answers = await self.aggregation_service.attach_votes(VotableType.ANSWER, answers)
        ranked = self.aggregation_service.rank_answers(answers)

        authors = await self.user_service.get_authors(
            [question.author_id] + [a.author_id for a in ranked]
        )

        return GetQuestionResponse(
            question=QuestionItem.build(
                question, authors[question.author_id], answer_count=len(ranked)
            ),
            answers=[AnswerItem.build(a, authors[a.author_id]) for a in ranked],
        )
