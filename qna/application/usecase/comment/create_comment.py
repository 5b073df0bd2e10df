"""Create comment use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import CommentItem
from qna.domain.service import CommentService, UserService
from qna.domain.value import AnswerId, QuestionId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request. Exactly one target must be set."""

    content: str
    question_id: Optional[str] = None  # UUID string
    answer_id: Optional[str] = None  # UUID string
    user_id: str  # User ID from authenticated user


class CreateCommentUseCase:
    """Use case for commenting on a question or an answer."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (author display fields)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            ValidationError: If content is empty or not exactly one target is given
            NotFoundError: If the target does not exist
        """
        author_id = UserId(UUID(request.user_id))
        comment = await self.comment_service.create_comment(
            author_id=author_id,
            content=request.content,
            question_id=QuestionId(UUID(request.question_id)) if request.question_id else None,
            answer_id=AnswerId(UUID(request.answer_id)) if request.answer_id else None,
        )
        authors = await self.user_service.get_authors([author_id])
        return CommentItem.build(comment, authors[author_id])
