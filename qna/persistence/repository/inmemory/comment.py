"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId
from qna.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._comments = db.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.question_id == question_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.answer_id == answer_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.author_id == author_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[:limit]

    async def save(self, comment: Comment) -> Comment:
        stored = comment.model_copy(update={"upvotes": frozenset(), "downvotes": frozenset()})
        self._comments[comment.id] = stored
        return comment

    async def delete_by_targets(
        self,
        question_ids: Sequence[QuestionId] = (),
        answer_ids: Sequence[AnswerId] = (),
    ) -> list[CommentId]:
        questions = set(question_ids)
        answers = set(answer_ids)
        deleted = [
            cid
            for cid, c in self._comments.items()
            if c.question_id in questions or c.answer_id in answers
        ]
        for cid in deleted:
            del self._comments[cid]
        return deleted
