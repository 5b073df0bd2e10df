"""PostgreSQL implementation of Question repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, case, delete, desc, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, QuestionSortOrder, UserId
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.tables import questions_table, votes_table


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so a search term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filters(
        stmt: Select, subject: Optional[str], search: Optional[str]
    ) -> Select:
        if subject:
            stmt = stmt.where(questions_table.c.tags.any(subject))
        if search:
            pattern = f"%{escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape="\\"),
                    questions_table.c.content.ilike(pattern, escape="\\"),
                )
            )
        return stmt

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        subject: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            subject=subject,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filters(select(questions_table), subject, search)

            if sort == QuestionSortOrder.TOP:
                # Net score from vote rows, grouped per question
                scores = (
                    select(
                        votes_table.c.votable_id.label("question_id"),
                        func.sum(case((votes_table.c.vote_type == "up", 1), else_=-1)).label(
                            "score"
                        ),
                    )
                    .where(votes_table.c.votable_type == "question")
                    .group_by(votes_table.c.votable_id)
                    .subquery()
                )
                stmt = stmt.outerjoin(
                    scores, scores.c.question_id == questions_table.c.id
                ).order_by(
                    desc(func.coalesce(scores.c.score, 0)),
                    desc(questions_table.c.created_at),
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            return [
                row_to_question(row._asdict())
                for row in result.fetchall()
            ]

    async def count(
        self,
        subject: Optional[str] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._apply_filters(
            select(func.count()).select_from(questions_table), subject, search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Question]:
        stmt = (
            select(questions_table)
            .where(questions_table.c.author_id == author_id)
            .order_by(desc(questions_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (upsert)."""
        question_dict = question_to_dict(question)
        stmt = insert(questions_table).values(**question_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[questions_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "content": stmt.excluded.content,
                "tags": stmt.excluded.tags,
                "images": stmt.excluded.images,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment the view counter."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table.c.views)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    async def delete(self, question_id: QuestionId) -> None:
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        await self.session.execute(stmt)
        await self.session.flush()
