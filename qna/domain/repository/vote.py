"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from qna.domain.value import UserId, VotableType, VoteState, VoteType


class VoteRepository(ABC):
    """Repository for vote rows.

    Each user holds at most one row per votable item. Writes are single
    statements against that row, so concurrent voters on the same item
    never overwrite each other.
    """

    @abstractmethod
    async def find_state(self, votable_type: VotableType, votable_id: UUID) -> VoteState:
        """Load the upvoter and downvoter sets of one item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            The item's vote state (empty sets if nobody voted)
        """
        pass

    @abstractmethod
    async def find_states(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> dict[UUID, VoteState]:
        """Load vote states for several items of one type (batch query).

        Args:
            votable_type: Type of items
            votable_ids: IDs of the items

        Returns:
            Mapping of votable_id -> VoteState; items without votes are absent
        """
        pass

    @abstractmethod
    async def cast(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> None:
        """Set the user's vote on an item to the given direction.

        Inserts the row or switches an existing row's direction.

        Args:
            user_id: The voter
            votable_type: Type of item
            votable_id: ID of the item
            vote_type: Direction to hold after the call
        """
        pass

    @abstractmethod
    async def retract(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        vote_type: VoteType,
    ) -> bool:
        """Remove the user's vote on an item if it has the given direction.

        Returns:
            True if a vote was removed, False if none matched
        """
        pass

    @abstractmethod
    async def delete_by_votables(
        self, votable_type: VotableType, votable_ids: Sequence[UUID]
    ) -> None:
        """Delete every vote on the given items (used by cascading deletes)."""
        pass
