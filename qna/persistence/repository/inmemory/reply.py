"""In-memory reply repository for testing."""

from typing import Optional, Sequence

from qna.domain.model import Reply
from qna.domain.repository import ReplyRepository
from qna.domain.value import AnswerId, ReplyId
from qna.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._replies = db.replies

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        return self._replies.get(reply_id)

    async def find_by_answer(
        self,
        answer_id: AnswerId,
        parent_reply_id: Optional[ReplyId] = None,
    ) -> list[Reply]:
        replies = [
            r
            for r in self._replies.values()
            if r.answer_id == answer_id and r.parent_reply_id == parent_reply_id
        ]
        replies.sort(key=lambda r: r.created_at, reverse=True)
        return replies

    async def find_all_by_answer(self, answer_id: AnswerId) -> list[Reply]:
        replies = [r for r in self._replies.values() if r.answer_id == answer_id]
        replies.sort(key=lambda r: r.created_at, reverse=True)
        return replies

    async def save(self, reply: Reply) -> Reply:
        stored = reply.model_copy(update={"upvotes": frozenset(), "downvotes": frozenset()})
        self._replies[reply.id] = stored
        return reply

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[ReplyId]:
        wanted = set(answer_ids)
        deleted = [rid for rid, r in self._replies.items() if r.answer_id in wanted]
        for rid in deleted:
            del self._replies[rid]
        return deleted
