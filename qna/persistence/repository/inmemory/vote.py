"""In-memory vote repository for testing."""

from typing import Sequence
from uuid import UUID, uuid4

from qna.domain.model import Vote
from qna.domain.repository import VoteRepository
from qna.domain.value import UserId, VotableType, VoteId, VoteState, VoteType
from qna.persistence.repository.inmemory.store import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Rows are keyed by (user_id, votable_type, votable_id), mirroring the
    unique constraint of the votes table.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        self._votes = db.votes

    async def find_state(self, votable_type: VotableType, votable_id: UUID) -> VoteState:
        states = await self.find_states(votable_type, [votable_id])
        return states.get(votable_id, VoteState())

    async def find_states(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteState]:
        wanted = set(votable_ids)
        upvotes: dict[UUID, set[UserId]] = {}
        downvotes: dict[UUID, set[UserId]] = {}
        for vote in self._votes.values():
            if vote.votable_type != votable_type or vote.votable_id not in wanted:
                continue
            target = upvotes if vote.vote_type == VoteType.UP else downvotes
            target.setdefault(vote.votable_id, set()).add(vote.user_id)

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
        key = (user_id, votable_type, votable_id)
        existing = self._votes.get(key)
        if existing is not None:
            self._votes[key] = existing.model_copy(update={"vote_type": vote_type})
            return

        self._votes[key] = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            votable_type=votable_type,
            votable_id=votable_id,
            vote_type=vote_type,
        )

    async def retract(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> bool:
        key = (user_id, votable_type, votable_id)
        existing = self._votes.get(key)
        if existing is None or existing.vote_type != vote_type:
            return False
        del self._votes[key]
        return True

    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> None:
        wanted = set(votable_ids)
        for key in [k for k in self._votes if k[1] == votable_type and k[2] in wanted]:
            del self._votes[key]
