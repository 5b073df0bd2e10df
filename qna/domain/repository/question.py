"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model import Question
from qna.domain.value import QuestionId, QuestionSortOrder, UserId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Questions come back with empty vote sets; vote state is stored in the
    vote repository and attached by the domain services.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        subject: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: LATEST (created_at desc) or TOP (net vote score desc,
                ties newest first)
            subject: Only questions carrying this tag
            search: Case-insensitive substring of title or content
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            One page of questions
        """
        pass

    @abstractmethod
    async def count(
        self,
        subject: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count questions matching the same filters as find_all."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int) -> list[Question]:
        """Find a user's most recent questions, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Atomically add one to the view counter.

        Returns:
            The new view count, or None if the question does not exist
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question row. Dependents are removed by the caller."""
        pass
