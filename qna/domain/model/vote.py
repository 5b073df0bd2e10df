"""Vote entity.

Each user holds at most one vote per item, either up or down.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, VotableType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    One row per (user, votable). Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Switching direction updates the row in place
    - Polymorphic reference to the votable item
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID
    vote_type: VoteType = VoteType.UP
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
