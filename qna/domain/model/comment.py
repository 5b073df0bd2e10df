"""Comment entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from qna.domain.model.common import VotableModel
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class Comment(VotableModel):
    """Comment attached to exactly one question or one answer.

    Likes and dislikes are stored as up/down votes.
    """

    id: CommentId
    author_id: UserId
    content: str = Field(min_length=1)
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_single_target(self) -> "Comment":
        """Comment must target a question or an answer, not both."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Comment must target exactly one question or answer")
        return self

    @property
    def like_count(self) -> int:
        return self.vote_count
