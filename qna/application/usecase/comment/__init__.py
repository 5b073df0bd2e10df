"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase

__all__ = [
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
]
