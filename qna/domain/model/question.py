"""Question aggregate root."""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from qna.domain.model.common import VotableModel
from qna.domain.value import QuestionId, UserId

MAX_TAGS = 5


class Question(VotableModel):
    """Question aggregate root.

    Business rules:
    - Between 1 and 5 non-empty tags
    - Vote count is derived from the vote sets
    - Answer count is computed at read time, not stored
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    tags: list[str]
    author_id: UserId
    views: int = Field(default=0, ge=0)
    images: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Strip tags, drop duplicates and enforce the 1..5 range."""
        tags: list[str] = []
        for tag in v:
            tag = tag.strip()
            if not tag:
                raise ValueError("Tags cannot be empty")
            if tag not in tags:
                tags.append(tag)
        if not 1 <= len(tags) <= MAX_TAGS:
            raise ValueError(f"A question needs between 1 and {MAX_TAGS} tags")
        return tags
