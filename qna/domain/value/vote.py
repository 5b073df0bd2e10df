"""Vote state value object.

Holds the upvoter and downvoter sets of one votable item and the toggle
rules shared by every votable type (question, answer, reply, comment).
"""

from typing import Optional

from pydantic import Field, model_validator

from qna.domain.value.common import ValueObject
from qna.domain.value.identifiers import UserId
from qna.domain.value.types import VoteType


class VoteState(ValueObject):
    """Upvoter and downvoter sets of a single votable item."""

    upvotes: frozenset[UserId] = Field(default_factory=frozenset)
    downvotes: frozenset[UserId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_exclusive(self) -> "VoteState":
        """A user can be in at most one of the two sets."""
        if self.upvotes & self.downvotes:
            raise ValueError("A user cannot both upvote and downvote the same item")
        return self

    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvotes) - len(self.downvotes)

    def user_vote(self, user_id: UserId) -> Optional[VoteType]:
        """Return the direction the user currently holds, if any."""
        if user_id in self.upvotes:
            return VoteType.UP
        if user_id in self.downvotes:
            return VoteType.DOWN
        return None

    def toggle(self, user_id: UserId, vote_type: VoteType) -> "VoteState":
        """Apply one vote click and return the resulting state.

        Voting the direction already held removes it. Voting the other
        direction (or voting fresh) sets it and clears the opposite one.
        """
        upvotes = set(self.upvotes)
        downvotes = set(self.downvotes)

        if vote_type == VoteType.UP:
            if user_id in upvotes:
                upvotes.discard(user_id)
            else:
                upvotes.add(user_id)
                downvotes.discard(user_id)
        else:
            if user_id in downvotes:
                downvotes.discard(user_id)
            else:
                downvotes.add(user_id)
                upvotes.discard(user_id)

        return VoteState(upvotes=frozenset(upvotes), downvotes=frozenset(downvotes))
