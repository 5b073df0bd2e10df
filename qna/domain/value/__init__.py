"""Domain value objects for the Q&A platform."""

from qna.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    ReplyId,
    UserId,
    VoteId,
)
from qna.domain.value.types import (
    ActivityType,
    Email,
    QuestionSortOrder,
    VotableType,
    VoteType,
)
from qna.domain.value.vote import VoteState

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "ReplyId",
    "CommentId",
    "VoteId",
    # Types
    "ActivityType",
    "Email",
    "QuestionSortOrder",
    "VotableType",
    "VoteType",
    "VoteState",
]
