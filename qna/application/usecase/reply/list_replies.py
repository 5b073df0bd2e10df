"""List replies use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import ReplyItem
from qna.domain.service import AggregationService, ReplyService, UserService
from qna.domain.value import AnswerId, ReplyId, VotableType


class ListRepliesRequest(BaseModel):
    """List replies request.

    Without parent_reply_id only top-level replies are returned.
    """

    answer_id: str  # UUID string
    parent_reply_id: Optional[str] = None  # UUID string


class ListRepliesUseCase:
    """Use case for listing one level of replies under an answer."""

    def __init__(
        self,
        reply_service: ReplyService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> None:
        """Initialize list replies use case.

        Args:
            reply_service: Reply domain service
            aggregation_service: Vote sets for each reply
            user_service: Author display fields
        """
        self.reply_service = reply_service
        self.aggregation_service = aggregation_service
        self.user_service = user_service

    async def execute(self, request: ListRepliesRequest) -> list[ReplyItem]:
        """Execute list replies flow.

        Returns:
            Replies newest first, each with its author's name and image

        Raises:
            NotFoundError: If the answer does not exist
        """
        parent_id = (
            ReplyId(UUID(request.parent_reply_id)) if request.parent_reply_id else None
        )
        replies = await self.reply_service.list_replies(
            AnswerId(UUID(request.answer_id)), parent_id
        )
        replies = await self.aggregation_service.attach_votes(VotableType.REPLY, replies)
        authors = await self.user_service.get_authors([r.author_id for r in replies])
        return [ReplyItem.build(r, authors[r.author_id]) for r in replies]
