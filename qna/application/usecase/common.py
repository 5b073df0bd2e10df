"""Response items shared by several use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from qna.domain.model import Answer, AuthorSummary, Comment, Question, Reply
from qna.domain.value import UserId, VoteState, VoteType


def _ids(user_ids: frozenset[UserId]) -> list[str]:
    return sorted(str(uid) for uid in user_ids)


class VoteResult(BaseModel):
    """Vote state of an item after a vote click."""

    upvotes: list[str]
    downvotes: list[str]
    vote_count: int
    user_vote: Optional[VoteType] = None

    @classmethod
    def from_state(cls, state: VoteState, user_id: Optional[UserId] = None) -> "VoteResult":
        return cls(
            upvotes=_ids(state.upvotes),
            downvotes=_ids(state.downvotes),
            vote_count=state.vote_count,
            user_vote=state.user_vote(user_id) if user_id is not None else None,
        )


class QuestionItem(BaseModel):
    """Question in responses."""

    id: str
    title: str
    content: str
    tags: list[str]
    images: list[str]
    author: AuthorSummary
    upvotes: list[str]
    downvotes: list[str]
    vote_count: int
    views: int
    answer_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(
        cls, question: Question, author: AuthorSummary, answer_count: int = 0
    ) -> "QuestionItem":
        return cls(
            id=str(question.id),
            title=question.title,
            content=question.content,
            tags=list(question.tags),
            images=list(question.images),
            author=author,
            upvotes=_ids(question.upvotes),
            downvotes=_ids(question.downvotes),
            vote_count=question.vote_count,
            views=question.views,
            answer_count=answer_count,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class AnswerItem(BaseModel):
    """Answer in responses."""

    id: str
    question_id: str
    content: str
    author: AuthorSummary
    upvotes: list[str]
    downvotes: list[str]
    vote_count: int
    accepted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def build(cls, answer: Answer, author: AuthorSummary) -> "AnswerItem":
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            author=author,
            upvotes=_ids(answer.upvotes),
            downvotes=_ids(answer.downvotes),
            vote_count=answer.vote_count,
            accepted=answer.accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class ReplyItem(BaseModel):
    """Reply in responses, author fields joined in."""

    id: str
    answer_id: str
    parent_reply_id: Optional[str]
    content: str
    author: AuthorSummary
    upvotes: list[str]
    downvotes: list[str]
    vote_count: int
    created_at: datetime

    @classmethod
    def build(cls, reply: Reply, author: AuthorSummary) -> "ReplyItem":
        return cls(
            id=str(reply.id),
            answer_id=str(reply.answer_id),
            parent_reply_id=str(reply.parent_reply_id) if reply.parent_reply_id else None,
            content=reply.content,
            author=author,
            upvotes=_ids(reply.upvotes),
            downvotes=_ids(reply.downvotes),
            vote_count=reply.vote_count,
            created_at=reply.created_at,
        )


class CommentItem(BaseModel):
    """Comment in responses. Likes are upvotes, dislikes downvotes."""

    id: str
    question_id: Optional[str]
    answer_id: Optional[str]
    content: str
    author: AuthorSummary
    likes: list[str]
    dislikes: list[str]
    like_count: int
    created_at: datetime

    @classmethod
    def build(cls, comment: Comment, author: AuthorSummary) -> "CommentItem":
        return cls(
            id=str(comment.id),
            question_id=str(comment.question_id) if comment.question_id else None,
            answer_id=str(comment.answer_id) if comment.answer_id else None,
            content=comment.content,
            author=author,
            likes=_ids(comment.upvotes),
            dislikes=_ids(comment.downvotes),
            like_count=comment.like_count,
            created_at=comment.created_at,
        )
