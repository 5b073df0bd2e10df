"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, desc, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Comment
from qna.domain.repository import CommentRepository
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId
from qna.persistence.mappers import comment_to_dict, row_to_comment
from qna.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> list[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.question_id == question_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.answer_id == answer_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_by_targets(
        self,
        question_ids: Sequence[QuestionId] = (),
        answer_ids: Sequence[AnswerId] = (),
    ) -> list[CommentId]:
        conditions = []
        if question_ids:
            conditions.append(comments_table.c.question_id.in_(question_ids))
        if answer_ids:
            conditions.append(comments_table.c.answer_id.in_(answer_ids))
        if not conditions:
            return []

        stmt = delete(comments_table).where(or_(*conditions)).returning(comments_table.c.id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [CommentId(row.id) for row in result.fetchall()]
