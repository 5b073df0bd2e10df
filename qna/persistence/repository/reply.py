"""PostgreSQL implementation of Reply repository."""

from typing import Optional, Sequence

from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Reply
from qna.domain.repository import ReplyRepository
from qna.domain.value import AnswerId, ReplyId
from qna.persistence.mappers import reply_to_dict, row_to_reply
from qna.persistence.tables import replies_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(replies_table).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_answer(
        self,
        answer_id: AnswerId,
        parent_reply_id: Optional[ReplyId] = None,
    ) -> list[Reply]:
        """Find one level of replies under an answer, newest first."""
        if parent_reply_id is None:
            level = replies_table.c.parent_reply_id.is_(None)
        else:
            level = replies_table.c.parent_reply_id == parent_reply_id

        stmt = (
            select(replies_table)
            .where(replies_table.c.answer_id == answer_id, level)
            .order_by(desc(replies_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def find_all_by_answer(self, answer_id: AnswerId) -> list[Reply]:
        """Find every reply under an answer, newest first."""
        stmt = (
            select(replies_table)
            .where(replies_table.c.answer_id == answer_id)
            .order_by(desc(replies_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def save(self, reply: Reply) -> Reply:
        """Save a reply (create)."""
        stmt = insert(replies_table).values(**reply_to_dict(reply))
        await self.session.execute(stmt)
        await self.session.flush()
        return reply

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[ReplyId]:
        if not answer_ids:
            return []
        stmt = (
            delete(replies_table)
            .where(replies_table.c.answer_id.in_(answer_ids))
            .returning(replies_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [ReplyId(row.id) for row in result.fetchall()]
