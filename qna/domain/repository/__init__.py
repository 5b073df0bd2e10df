"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from qna.domain.repository.answer import AnswerRepository
from qna.domain.repository.comment import CommentRepository
from qna.domain.repository.question import QuestionRepository
from qna.domain.repository.reply import ReplyRepository
from qna.domain.repository.user import UserRepository
from qna.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "ReplyRepository",
    "CommentRepository",
    "VoteRepository",
]
