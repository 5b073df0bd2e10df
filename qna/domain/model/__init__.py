"""Domain model entities for the Q&A platform."""

from qna.domain.model.answer import Answer
from qna.domain.model.comment import Comment
from qna.domain.model.common import DomainModel, VotableModel
from qna.domain.model.question import Question
from qna.domain.model.reply import Reply
from qna.domain.model.profile import ActivityItem, Badge, UserStats
from qna.domain.model.user import AuthorSummary, User
from qna.domain.model.vote import Vote

__all__ = [
    "DomainModel",
    "VotableModel",
    "User",
    "AuthorSummary",
    "UserStats",
    "Badge",
    "ActivityItem",
    "Question",
    "Answer",
    "Reply",
    "Comment",
    "Vote",
]
