"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from qna.domain.model import Reply
from qna.domain.value import AnswerId, ReplyId


class ReplyRepository(ABC):
    """Repository for Reply entities.

    The authoritative reply set of an answer is every reply whose
    answer_id matches; there is no separate index on the answer.
    """

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID.

        Args:
            reply_id: The reply's unique identifier

        Returns:
            The reply if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_answer(
        self,
        answer_id: AnswerId,
        parent_reply_id: Optional[ReplyId] = None,
    ) -> list[Reply]:
        """Find one level of replies under an answer, newest first.

        Args:
            answer_id: The answer's ID
            parent_reply_id: None for top-level replies, otherwise the
                parent whose direct children are returned

        Returns:
            Replies ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_all_by_answer(self, answer_id: AnswerId) -> list[Reply]:
        """Find every reply under an answer at any depth, newest first."""
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create)."""
        pass

    @abstractmethod
    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[ReplyId]:
        """Delete every reply under the given answers.

        Returns:
            IDs of the deleted replies
        """
        pass
