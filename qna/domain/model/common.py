"""Base models for all domain entities."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from qna.domain.value import UserId, VoteState


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class VotableModel(DomainModel):
    """Base class for entities that carry upvoter/downvoter sets.

    The sets are the projection of the entity's vote rows; the count is
    always derived from them and never stored.
    """

    upvotes: frozenset[UserId] = Field(default_factory=frozenset)
    downvotes: frozenset[UserId] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def validate_votes_exclusive(self) -> "VotableModel":
        """A user can be in at most one of the two sets."""
        if self.upvotes & self.downvotes:
            raise ValueError("A user cannot both upvote and downvote the same item")
        return self

    @property
    def votes(self) -> VoteState:
        return VoteState(upvotes=self.upvotes, downvotes=self.downvotes)

    @property
    def vote_count(self) -> int:
        """Net score: upvotes minus downvotes."""
        return len(self.upvotes) - len(self.downvotes)
