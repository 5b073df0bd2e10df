"""In-memory question repository for testing."""

from typing import Optional

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, QuestionSortOrder, UserId, VotableType, VoteType
from qna.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db
        self._questions = db.questions

    def _filter(self, subject: Optional[str], search: Optional[str]) -> list[Question]:
        questions = list(self._questions.values())
        if subject:
            questions = [q for q in questions if subject in q.tags]
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.content.lower()
            ]
        return questions

    def _score(self, question: Question) -> int:
        score = 0
        for (_, votable_type, votable_id), vote in self._db.votes.items():
            if votable_type == VotableType.QUESTION and votable_id == question.id:
                score += 1 if vote.vote_type == VoteType.UP else -1
        return score

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        subject: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._filter(subject, search)

        # Newest first, then a stable sort on score keeps ties newest first
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.TOP:
            questions.sort(key=self._score, reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self,
        subject: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        return len(self._filter(subject, search))

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return self._questions.get(question_id)

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Question]:
        questions = [q for q in self._questions.values() if q.author_id == author_id]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[:limit]

    async def count_by_author(self, author_id: UserId) -> int:
        return sum(1 for q in self._questions.values() if q.author_id == author_id)

    async def save(self, question: Question) -> Question:
        # Vote sets are never stored on the row
        stored = question.model_copy(update={"upvotes": frozenset(), "downvotes": frozenset()})
        self._questions[question.id] = stored
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = updated
        return updated.views

    async def delete(self, question_id: QuestionId) -> None:
        if self._questions.pop(question_id, None) is not None:
            self._db.cascade_question(question_id)
