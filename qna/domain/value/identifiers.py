"""Strongly typed identifiers for Q&A domain entities.

Using NewType keeps question, answer and reply IDs from being mixed up
even though they are all UUIDs underneath.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
ReplyId = NewType("ReplyId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
