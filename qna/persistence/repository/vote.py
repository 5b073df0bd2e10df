"""PostgreSQL implementation of Vote repository."""

from collections import defaultdict
from typing import Sequence
from uuid import UUID, uuid4

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.repository import VoteRepository
from qna.domain.value import UserId, VotableType, VoteState, VoteType
from qna.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    cast and retract are single statements on the (user, votable) row.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_state(self, votable_type: VotableType, votable_id: UUID) -> VoteState:
        """Load the vote sets of one item."""
        states = await self.find_states(votable_type, [votable_id])
        return states.get(votable_id, VoteState())

    async def find_states(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteState]:
        """Load vote sets for several items (batch query)."""
        if not votable_ids:
            return {}

        stmt = select(
            votes_table.c.votable_id, votes_table.c.user_id, votes_table.c.vote_type
        ).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self.session.execute(stmt)

        upvotes: dict[UUID, set[UserId]] = defaultdict(set)
        downvotes: dict[UUID, set[UserId]] = defaultdict(set)
        for row in result.fetchall():
            target = upvotes if row.vote_type == VoteType.UP.value else downvotes
            target[row.votable_id].add(UserId(row.user_id))

        return {
            vid: VoteState(
                upvotes=frozenset(upvotes.get(vid, set())),
                downvotes=frozenset(downvotes.get(vid, set())),
            )
            for vid in set(upvotes) | set(downvotes)
        }

    async def cast(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> None:
        """Insert the user's vote or switch its direction."""
        stmt = insert(votes_table).values(
            id=uuid4(),
            user_id=user_id,
            votable_type=votable_type.value,
            votable_id=votable_id,
            vote_type=vote_type.value,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="unique_vote",
            set_={"vote_type": stmt.excluded.vote_type},
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def retract(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> bool:
        """Delete the user's vote if it has the given direction."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
                votes_table.c.vote_type == vote_type.value,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> None:
        if not votable_ids:
            return
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
