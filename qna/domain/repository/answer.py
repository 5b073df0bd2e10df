"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model import Answer
from qna.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entities."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> dict[AnswerId, Answer]:
        """Find several answers in one query."""
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, oldest first.

        Args:
            question_id: The question's ID

        Returns:
            Answers ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question in one grouped query.

        Questions without answers are absent from the result.
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int) -> list[Answer]:
        """Find a user's most recent answers, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        """Count a user's answers.

        Args:
            author_id: The author's ID
            accepted_only: Only count answers marked accepted
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        pass

    @abstractmethod
    async def set_accepted(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Mark one answer of a question accepted and clear all the others.

        Runs as a single statement so at most one answer per question is
        ever accepted. Passing None clears the flag on every answer.

        Args:
            question_id: The question whose answers are updated
            answer_id: The answer to accept, or None
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        """Delete every answer of a question.

        Returns:
            IDs of the deleted answers
        """
        pass
