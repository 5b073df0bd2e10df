"""In-memory answer repository for testing."""

from typing import Optional, Sequence

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId, UserId
from qna.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self._db = db
        self._answers = db.answers

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        return self._answers.get(answer_id)

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> dict[AnswerId, Answer]:
        return {aid: self._answers[aid] for aid in answer_ids if aid in self._answers}

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        wanted = set(question_ids)
        counts: dict[QuestionId, int] = {}
        for answer in self._answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Answer]:
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[:limit]

    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        return sum(
            1
            for a in self._answers.values()
            if a.author_id == author_id and (a.accepted or not accepted_only)
        )

    async def save(self, answer: Answer) -> Answer:
        stored = answer.model_copy(update={"upvotes": frozenset(), "downvotes": frozenset()})
        self._answers[answer.id] = stored
        return answer

    async def set_accepted(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        for aid, answer in list(self._answers.items()):
            if answer.question_id == question_id:
                self._answers[aid] = answer.model_copy(
                    update={"accepted": aid == answer_id}
                )

    async def delete_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        deleted = [aid for aid, a in self._answers.items() if a.question_id == question_id]
        for aid in deleted:
            del self._answers[aid]
        self._db.cascade_answers(set(deleted))
        return deleted
