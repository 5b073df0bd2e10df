"""Aggregation domain service.

Everything derived at read time lives here: vote sets projected from the
vote rows, net vote counts, answer counts and answer ranking.
"""

from typing import Sequence, TypeVar
from uuid import UUID

import logfire

from qna.domain.model import Answer, VotableModel
from qna.domain.repository import AnswerRepository, VoteRepository
from qna.domain.value import QuestionId, VotableType

from .base import Service

V = TypeVar("V", bound=VotableModel)


class AggregationService(Service):
    """Domain service for derived counts and ordering."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize aggregation service.

        Args:
            vote_repository: Vote repository
            answer_repository: Answer repository
        """
        self.vote_repository = vote_repository
        self.answer_repository = answer_repository

    async def attach_votes(self, votable_type: VotableType, items: Sequence[V]) -> list[V]:
        """Fill in upvote/downvote sets for a batch of entities.

        Args:
            votable_type: Type shared by all items
            items: Entities loaded from their repository

        Returns:
            Copies of the items carrying their current vote sets, same order
        """
        if not items:
            return []

        ids: list[UUID] = [item.id for item in items]  # type: ignore[attr-defined]
        states = await self.vote_repository.find_states(votable_type, ids)

        result: list[V] = []
        for item in items:
            state = states.get(item.id)  # type: ignore[attr-defined]
            if state is None:
                result.append(item)
            else:
                result.append(
                    item.model_copy(
                        update={"upvotes": state.upvotes, "downvotes": state.downvotes}
                    )
                )
        return result

    async def attach_votes_one(self, votable_type: VotableType, item: V) -> V:
        (attached,) = await self.attach_votes(votable_type, [item])
        return attached

    async def answer_counts(self, question_ids: Sequence[QuestionId]) -> dict[QuestionId, int]:
        """Count answers per question with a single grouped query.

        Args:
            question_ids: Questions on the current page

        Returns:
            Mapping of question_id -> answer count, 0 for questions without answers
        """
        with logfire.span("aggregation_service.answer_counts", count=len(question_ids)):
            if not question_ids:
                return {}
            counts = await self.answer_repository.count_by_questions(question_ids)
            return {qid: counts.get(qid, 0) for qid in question_ids}

    @staticmethod
    def vote_count(entity: VotableModel) -> int:
        """Net score of an entity: upvotes minus downvotes."""
        return len(entity.upvotes) - len(entity.downvotes)

    @classmethod
    def rank_answers(cls, answers: Sequence[Answer]) -> list[Answer]:
        """Order answers for display under their question.

        Accepted answer first, then by net vote count descending. Ties keep
        the oldest answer first.
        """
        return sorted(
            answers,
            key=lambda a: (not a.accepted, -cls.vote_count(a), a.created_at),
        )
