"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model import Comment
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class CommentRepository(ABC):
    """Repository for Comment entities."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Comment]:
        """Find comments attached to a question, oldest first."""
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Find comments attached to an answer, oldest first."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int) -> list[Comment]:
        """Find a user's most recent comments, newest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        pass

    @abstractmethod
    async def delete_by_targets(
        self,
        question_ids: Sequence[QuestionId] = (),
        answer_ids: Sequence[AnswerId] = (),
    ) -> list[CommentId]:
        """Delete comments attached to any of the given questions or answers.

        Returns:
            IDs of the deleted comments
        """
        pass
