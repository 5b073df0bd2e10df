"""Comment domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.model import Comment
from qna.domain.repository import AnswerRepository, CommentRepository, QuestionRepository
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.comment_repository = comment_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    @staticmethod
    def _check_single_target(
        question_id: Optional[QuestionId], answer_id: Optional[AnswerId]
    ) -> None:
        if (question_id is None) == (answer_id is None):
            raise ValidationError("Exactly one of question_id or answer_id is required")

    async def _require_target(
        self, question_id: Optional[QuestionId], answer_id: Optional[AnswerId]
    ) -> None:
        if question_id is not None:
            if await self.question_repository.find_by_id(question_id) is None:
                raise NotFoundError("Question", str(question_id))
        elif answer_id is not None:
            if await self.answer_repository.find_by_id(answer_id) is None:
                raise NotFoundError("Answer", str(answer_id))

    async def create_comment(
        self,
        author_id: UserId,
        content: str,
        question_id: Optional[QuestionId] = None,
        answer_id: Optional[AnswerId] = None,
    ) -> Comment:
        """Comment on a question or an answer.

        Args:
            author_id: Author user ID
            content: Comment text
            question_id: Target question (exclusive with answer_id)
            answer_id: Target answer (exclusive with question_id)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or not exactly one target is given
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            question_id=str(question_id) if question_id else None,
            answer_id=str(answer_id) if answer_id else None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Content is required")
            self._check_single_target(question_id, answer_id)
            await self._require_target(question_id, answer_id)

            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    author_id=author_id,
                    content=content,
                    question_id=question_id,
                    answer_id=answer_id,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def list_comments(
        self,
        question_id: Optional[QuestionId] = None,
        answer_id: Optional[AnswerId] = None,
    ) -> list[Comment]:
        """List comments on a question or an answer, oldest first.

        Raises:
            ValidationError: If not exactly one target is given
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "comment_service.list_comments",
            question_id=str(question_id) if question_id else None,
            answer_id=str(answer_id) if answer_id else None,
        ):
            self._check_single_target(question_id, answer_id)
            await self._require_target(question_id, answer_id)
            if question_id is not None:
                return await self.comment_repository.find_by_question(question_id)
            return await self.comment_repository.find_by_answer(answer_id)  # type: ignore[arg-type]
