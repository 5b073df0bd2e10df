"""Domain value objects for the Q&A platform.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from qna.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r"^\w+([\.-]?\w+)*@\w+([\.-]?\w+)*(\.\w{2,3})+$")


class VoteType(str, Enum):
    """Direction of a vote.

    Comments present these as like/dislike, the storage is the same.
    """

    UP = "up"
    DOWN = "down"


class VotableType(str, Enum):
    """Type of entity that carries upvote/downvote sets."""

    QUESTION = "question"
    ANSWER = "answer"
    REPLY = "reply"
    COMMENT = "comment"


class QuestionSortOrder(str, Enum):
    """Sort modes for the question listing."""

    LATEST = "latest"
    TOP = "top"


class ActivityType(str, Enum):
    """Kinds of items shown in a user's recent activity."""

    QUESTION = "question"
    ANSWER = "answer"
    COMMENT = "comment"


class Email(RootValueObject[str]):
    """Email address, normalised for case-insensitive uniqueness.

    Stored stripped and lower-cased so that "Alice@Example.com" and
    "alice@example.com " are the same account.
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Lower-case, strip and validate the address."""
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v
