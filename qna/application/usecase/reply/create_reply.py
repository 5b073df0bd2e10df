"""Create reply use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import ReplyItem
from qna.domain.service import ReplyService, UserService
from qna.domain.value import AnswerId, ReplyId, UserId


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    answer_id: str  # UUID string
    content: str
    parent_reply_id: Optional[str] = None  # UUID string, None for top-level
    user_id: str  # User ID from authenticated user


class CreateReplyResponse(ReplyItem):
    """Created reply with its nesting depth (0 for top-level)."""

    depth: int


class CreateReplyUseCase:
    """Use case for replying to an answer or to another reply."""

    def __init__(self, reply_service: ReplyService, user_service: UserService) -> None:
        self.reply_service = reply_service
        self.user_service = user_service

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        Raises:
            ValidationError: If content is empty or the parent is under another answer
            NotFoundError: If the answer or parent reply does not exist
        """
        author_id = UserId(UUID(request.user_id))
        parent_id = (
            ReplyId(UUID(request.parent_reply_id)) if request.parent_reply_id else None
        )

        reply = await self.reply_service.create_reply(
            answer_id=AnswerId(UUID(request.answer_id)),
            author_id=author_id,
            content=request.content,
            parent_reply_id=parent_id,
        )
        depth = await self.reply_service.get_depth(reply)
        authors = await self.user_service.get_authors([author_id])

        item = ReplyItem.build(reply, authors[author_id])
        return CreateReplyResponse(**item.model_dump(), depth=depth)
