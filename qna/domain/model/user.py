"""User aggregate root.

Identity is verified by an external provider; this model holds the
public profile fields.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from qna.domain.model.common import DomainModel
from qna.domain.value import Email, UserId
from qna.domain.value.common import ValueObject


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    email: Email
    image: Optional[str] = None
    bio: str = ""
    location: str = ""
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class AuthorSummary(ValueObject):
    """Author display fields joined onto content in read models."""

    id: str
    name: str
    image: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "AuthorSummary":
        return cls(id=str(user.id), name=user.name, image=user.image)

    @classmethod
    def unknown(cls, user_id: UserId) -> "AuthorSummary":
        """Placeholder for content whose author no longer exists."""
        return cls(id=str(user_id), name="Unknown user")
