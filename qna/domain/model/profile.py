"""Read models for the public user profile."""

from datetime import datetime

from qna.domain.value import ActivityType
from qna.domain.value.common import ValueObject


class UserStats(ValueObject):
    """Contribution counters shown on a profile."""

    questions: int = 0
    answers: int = 0
    accepted_answers: int = 0


class Badge(ValueObject):
    name: str
    description: str


class ActivityItem(ValueObject):
    """One entry of a user's recent activity feed."""

    id: str
    type: ActivityType
    title: str
    created_at: datetime
    link: str
