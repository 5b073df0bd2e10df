"""List comments use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import CommentItem
from qna.domain.service import AggregationService, CommentService, UserService
from qna.domain.value import AnswerId, QuestionId, VotableType


class ListCommentsRequest(BaseModel):
    question_id: Optional[str] = None  # UUID string
    answer_id: Optional[str] = None  # UUID string


class ListCommentsResponse(BaseModel):
    comments: list[CommentItem]
    total: int


class ListCommentsUseCase:
    """Use case for listing comments on a question or an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        self.comment_service = comment_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        comments = await self.comment_service.list_comments(
            question_id=QuestionId(UUID(request.question_id)) if request.question_id else None,
            answer_id=AnswerId(UUID(request.answer_id)) if request.answer_id else None,
        )
        comments = await self.aggregation_service.attach_votes(VotableType.COMMENT, comments)
        authors = await self.user_service.get_authors([c.author_id for c in comments])
        return ListCommentsResponse(
            comments=[CommentItem.build(c, authors[c.author_id]) for c in comments],
            total=len(comments),
        )
