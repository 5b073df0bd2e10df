"""PostgreSQL implementation of Answer repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, desc, func, literal, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, QuestionId, UserId
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_ids(self, answer_ids: Sequence[AnswerId]) -> dict[AnswerId, Answer]:
        if not answer_ids:
            return {}
        stmt = select(answers_table).where(answers_table.c.id.in_(answer_ids))
        result = await self.session.execute(stmt)
        answers = [row_to_answer(row._asdict()) for row in result.fetchall()]
        return {answer.id: answer for answer in answers}

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question (single grouped query)."""
        if not question_ids:
            return {}
        stmt = (
            select(answers_table.c.question_id, func.count().label("count"))
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {QuestionId(row.question_id): row.count for row in result.fetchall()}

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Answer]:
        stmt = (
            select(answers_table)
            .where(answers_table.c.author_id == author_id)
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId, accepted_only: bool = False) -> int:
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        if accepted_only:
            stmt = stmt.where(answers_table.c.accepted.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (upsert)."""
        answer_dict = answer_to_dict(answer)
        stmt = insert(answers_table).values(**answer_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[answers_table.c.id],
            set_={
                "content": stmt.excluded.content,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def set_accepted(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> None:
        """Set accepted = (id = answer_id) across the question's answers."""
        accepted = (
            answers_table.c.id == answer_id if answer_id is not None else literal(False)
        )
        stmt = (
            update(answers_table)
            .where(
                and_(
                    answers_table.c.question_id == question_id,
                    # Skip rows that would not change
                    answers_table.c.accepted.is_distinct_from(accepted),
                )
            )
            .values(accepted=accepted, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_question(self, question_id: QuestionId) -> list[AnswerId]:
        stmt = (
            delete(answers_table)
            .where(answers_table.c.question_id == question_id)
            .returning(answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [AnswerId(row.id) for row in result.fetchall()]
