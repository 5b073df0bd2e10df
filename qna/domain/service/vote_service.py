"""Vote domain service.

A single toggle implementation serves questions, answers, replies and
comments. Each click becomes one write against the voter's own vote row,
so concurrent voters on the same item never lose each other's votes.
"""

from typing import Optional, Union
from uuid import UUID

import logfire

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    ReplyRepository,
    VoteRepository,
)
from qna.domain.value import UserId, VotableType, VoteState, VoteType

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_repository: Question repository
            answer_repository: Answer repository
            reply_repository: Reply repository
            comment_repository: Comment repository
        """
        self.vote_repository = vote_repository
        self._votables = {
            VotableType.QUESTION: question_repository,
            VotableType.ANSWER: answer_repository,
            VotableType.REPLY: reply_repository,
            VotableType.COMMENT: comment_repository,
        }

    @staticmethod
    def parse_vote_type(value: Union[str, VoteType]) -> VoteType:
        """Parse a vote direction.

        Raises:
            ValidationError: If the value is neither "up" nor "down"
        """
        if isinstance(value, VoteType):
            return value
        try:
            return VoteType(value)
        except ValueError:
            raise ValidationError(f"Invalid vote type: {value!r}")

    async def get_state(self, votable_type: VotableType, votable_id: UUID) -> VoteState:
        return await self.vote_repository.find_state(votable_type, votable_id)

    async def apply_vote(
        self,
        votable_type: VotableType,
        votable_id: UUID,
        user_id: UserId,
        vote_type: Union[str, VoteType],
    ) -> VoteState:
        """Toggle a user's vote on an item.

        Voting the direction already held removes the vote. Voting the
        other direction (or voting fresh) sets it and clears the opposite.

        Args:
            votable_type: Type of item being voted on
            votable_id: ID of the item
            user_id: The voter
            vote_type: "up" or "down"

        Returns:
            Vote state read back after the write

        Raises:
            ValidationError: If vote_type is not "up" or "down"
            NotFoundError: If the item does not exist
        """
        direction = self.parse_vote_type(vote_type)

        with logfire.span(
            "vote_service.apply_vote",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
            vote_type=direction.value,
        ):
            repository = self._votables[votable_type]
            entity = await repository.find_by_id(votable_id)  # type: ignore[arg-type]
            if entity is None:
                logfire.warn(
                    "Vote on non-existent item",
                    votable_type=votable_type.value,
                    votable_id=str(votable_id),
                )
                raise NotFoundError(votable_type.value.capitalize(), str(votable_id))

            current = await self.vote_repository.find_state(votable_type, votable_id)
            toggled = current.toggle(user_id, direction)
            held: Optional[VoteType] = toggled.user_vote(user_id)

            if held is None:
                await self.vote_repository.retract(
                    user_id, votable_type, votable_id, direction
                )
            else:
                await self.vote_repository.cast(user_id, votable_type, votable_id, held)

            state = await self.vote_repository.find_state(votable_type, votable_id)
            logfire.info(
                "Vote applied",
                votable_type=votable_type.value,
                votable_id=str(votable_id),
                user_vote=held.value if held else None,
                vote_count=state.vote_count,
            )
            return state
