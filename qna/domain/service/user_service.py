"""User domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import ConflictError, NotFoundError, ValidationError
from qna.domain.model import ActivityItem, AuthorSummary, Badge, User, UserStats
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
)
from qna.domain.value import ActivityType, Email, QuestionId, UserId

from .base import Service

# (name, description, stat, threshold)
BADGE_RULES: list[tuple[str, str, str, int]] = [
    ("Curious", "Asked 5 or more questions", "questions", 5),
    ("Helper", "Provided 10 or more answers", "answers", 10),
    ("Expert", "Had 3 or more answers accepted as best", "accepted_answers", 3),
]

# Items fetched per content type before merging the activity feed
ACTIVITY_FETCH_PER_TYPE = 3


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            question_repository: Question repository (profile stats)
            answer_repository: Answer repository (profile stats)
            comment_repository: Comment repository (activity feed)
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository

    async def get_user_by_id(self, user_id: UserId) -> Optional[User]:
        return await self.user_repository.find_by_id(user_id)

    async def get_user(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def get_authors(self, user_ids: Sequence[UserId]) -> dict[UserId, AuthorSummary]:
        """Resolve author display fields for a batch of content.

        Authors that no longer exist get a placeholder summary.
        """
        unique_ids = list(dict.fromkeys(user_ids))
        users = await self.user_repository.find_by_ids(unique_ids)
        return {
            uid: AuthorSummary.from_user(users[uid]) if uid in users else AuthorSummary.unknown(uid)
            for uid in unique_ids
        }

    async def register_user(
        self, name: str, email: str, image: Optional[str] = None
    ) -> User:
        """Register a new user.

        Emails are compared case-insensitively.

        Args:
            name: Display name
            email: Email address
            image: Optional avatar URL

        Returns:
            Created user

        Raises:
            ValidationError: If name or email are malformed
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register_user"):
            try:
                user = User(
                    id=UserId(uuid4()),
                    name=name.strip(),
                    email=Email(email),
                    image=image,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            if await self.user_repository.find_by_email(user.email) is not None:
                logfire.warn("Duplicate email on registration")
                raise ConflictError("User already exists")

            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def get_stats(self, user_id: UserId) -> UserStats:
        """Count a user's questions, answers and accepted answers."""
        return UserStats(
            questions=await self.question_repository.count_by_author(user_id),
            answers=await self.answer_repository.count_by_author(user_id),
            accepted_answers=await self.answer_repository.count_by_author(
                user_id, accepted_only=True
            ),
        )

    @staticmethod
    def get_badges(stats: UserStats) -> list[Badge]:
        """Award rule-based badges from profile stats."""
        return [
            Badge(name=name, description=description)
            for name, description, stat, threshold in BADGE_RULES
            if getattr(stats, stat) >= threshold
        ]

    async def get_recent_activity(self, user_id: UserId, limit: int = 5) -> list[ActivityItem]:
        """Merge a user's latest questions, answers and comments.

        Up to three of each are fetched and the newest `limit` kept.
        """
        with logfire.span("user_service.get_recent_activity", user_id=str(user_id)):
            questions = await self.question_repository.find_by_author(
                user_id, ACTIVITY_FETCH_PER_TYPE
            )
            answers = await self.answer_repository.find_by_author(
                user_id, ACTIVITY_FETCH_PER_TYPE
            )
            comments = await self.comment_repository.find_by_author(
                user_id, ACTIVITY_FETCH_PER_TYPE
            )

            # Comments on answers link to the answer's question
            commented_answers = await self.answer_repository.find_by_ids(
                [c.answer_id for c in comments if c.answer_id is not None]
            )

            titles: dict[QuestionId, str] = {q.id: q.title for q in questions}

            async def question_title(question_id: QuestionId) -> Optional[str]:
                if question_id not in titles:
                    question = await self.question_repository.find_by_id(question_id)
                    if question is None:
                        return None
                    titles[question_id] = question.title
                return titles[question_id]

            items: list[ActivityItem] = [
                ActivityItem(
                    id=str(q.id),
                    type=ActivityType.QUESTION,
                    title=q.title,
                    created_at=q.created_at,
                    link=f"/questions/{q.id}",
                )
                for q in questions
            ]

            for a in answers:
                title = await question_title(a.question_id)
                items.append(
                    ActivityItem(
                        id=str(a.id),
                        type=ActivityType.ANSWER,
                        title=f"Answer to: {title or 'Question'}",
                        created_at=a.created_at,
                        link=f"/questions/{a.question_id}",
                    )
                )

            for c in comments:
                if c.question_id is not None:
                    target: Optional[QuestionId] = c.question_id
                    fallback = "Question"
                else:
                    answer = commented_answers.get(c.answer_id)  # type: ignore[arg-type]
                    target = answer.question_id if answer else None
                    fallback = "Answer"
                title = await question_title(target) if target else None
                items.append(
                    ActivityItem(
                        id=str(c.id),
                        type=ActivityType.COMMENT,
                        title=f"Comment on: {title or fallback}",
                        created_at=c.created_at,
                        link=f"/questions/{target}" if target else "/",
                    )
                )

            items.sort(key=lambda item: item.created_at, reverse=True)
            return items[:limit]
