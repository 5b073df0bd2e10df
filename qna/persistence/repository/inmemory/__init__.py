"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .question import InMemoryQuestionRepository
from .reply import InMemoryReplyRepository
from .store import InMemoryDatabase
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryQuestionRepository",
    "InMemoryReplyRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
