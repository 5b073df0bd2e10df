"""Answer entity."""

from datetime import datetime, timezone

from pydantic import Field

from qna.domain.model.common import VotableModel
from qna.domain.value import AnswerId, QuestionId, UserId


class Answer(VotableModel):
    """Answer to a question.

    At most one answer per question is accepted; the repository clears
    siblings in the same statement that accepts a new one. Replies are
    not indexed here, they are always queried by answer ID.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1)
    accepted: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
