"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase
from .get_reply_tree import (
    GetReplyTreeRequest,
    GetReplyTreeResponse,
    GetReplyTreeUseCase,
    ReplyTreeItem,
)
from .list_replies import ListRepliesRequest, ListRepliesUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
    "GetReplyTreeRequest",
    "GetReplyTreeResponse",
    "GetReplyTreeUseCase",
    "ListRepliesRequest",
    "ListRepliesUseCase",
    "ReplyTreeItem",
]
