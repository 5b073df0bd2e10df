"""Domain services."""

from .aggregation_service import AggregationService
from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .question_service import QuestionService
from .reply_service import ReplyService, ReplyTreeNode
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AggregationService",
    "AnswerService",
    "CommentService",
    "JWTService",
    "QuestionService",
    "ReplyService",
    "ReplyTreeNode",
    "Service",
    "UserService",
    "VoteService",
]
