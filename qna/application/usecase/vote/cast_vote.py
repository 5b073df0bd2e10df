"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from qna.application.usecase.common import VoteResult
from qna.domain.service import VoteService
from qna.domain.value import UserId, VotableType


class CastVoteRequest(BaseModel):
    """Vote click on a question, answer, reply or comment."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    vote_type: str  # "up" or "down", validated by the vote service


class CastVoteUseCase:
    """Use case for toggling an up/down vote on any votable item."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteResult:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Vote sets, net count and the caller's current vote

        Raises:
            ValidationError: If vote_type is not "up" or "down"
            NotFoundError: If the item does not exist
        """
        user_id = UserId(UUID(request.user_id))
        state = await self.vote_service.apply_vote(
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            user_id=user_id,
            vote_type=request.vote_type,
        )
        return VoteResult.from_state(state, user_id)
