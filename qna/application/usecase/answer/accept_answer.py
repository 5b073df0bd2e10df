"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import AnswerItem
from qna.domain.service import AggregationService, AnswerService, UserService
from qna.domain.value import AnswerId, UserId, VotableType


class AcceptAnswerRequest(BaseModel):
    """Accept (or withdraw acceptance of) an answer."""

    answer_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    accepted: bool = True


class AcceptAnswerUseCase:
    """Use case for the question author marking the accepted answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        """Initialize accept answer use case.

        Args:
            answer_service: Answer domain service
            aggregation_service: Vote sets for the response
            user_service: Author display fields
        """
        self.answer_service = answer_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: AcceptAnswerRequest) -> AnswerItem:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller did not ask the question
        """
        answer_id = AnswerId(UUID(request.answer_id))
        user_id = UserId(UUID(request.user_id))

        if request.accepted:
            answer = await self.answer_service.accept_answer(answer_id, user_id)
        else:
            answer = await self.answer_service.unaccept_answer(answer_id, user_id)

        answer = await self.aggregation_service.attach_votes_one(VotableType.ANSWER, answer)
        authors = await self.user_service.get_authors([answer.author_id])
        return AnswerItem.build(answer, authors[answer.author_id])
