"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from qna.domain.error import ConflictError, NotFoundError, ValidationError
from qna.domain.model import Comment, UserStats
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
)
from qna.domain.service import UserService
from qna.domain.value import ActivityType, CommentId, UserId
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterUser:
    @pytest.mark.asyncio
    async def test_register_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.register_user("Ada", "Ada@Example.com")

        # Assert
        assert user.name == "Ada"
        assert user.email.root == "ada@example.com"
        assert await user_service.get_user(user.id) == user

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts_case_insensitively(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register_user("Ada", "ada@example.com")

        # Act & Assert
        with pytest.raises(ConflictError, match="User already exists"):
            await user_service.register_user("Ada Again", " ADA@example.com ")

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="Invalid email"):
            await user_service.register_user("Ada", "not-an-email")


class TestGetUser:
    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_user(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_authors_uses_placeholder_for_missing(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        known = await user_repo.save(make_user("Grace"))
        missing = UserId(uuid4())

        # Act
        authors = await user_service.get_authors([known.id, missing, known.id])

        # Assert
        assert authors[known.id].name == "Grace"
        assert authors[missing].name == "Unknown user"
        assert len(authors) == 2


class TestStatsAndBadges:
    @pytest.mark.asyncio
    async def test_stats_count_contributions(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user = make_user()
        question = await question_repo.save(make_question(user.id))
        await question_repo.save(make_question(user.id))
        other_question = await question_repo.save(make_question(UserId(uuid4())))
        await answer_repo.save(make_answer(other_question.id, user.id, accepted=True))
        await answer_repo.save(make_answer(question.id, user.id))

        # Act
        stats = await user_service.get_stats(user.id)

        # Assert
        assert stats == UserStats(questions=2, answers=2, accepted_answers=1)

    def test_no_badges_below_thresholds(self):
        stats = UserStats(questions=4, answers=9, accepted_answers=2)

        assert UserService.get_badges(stats) == []

    def test_badges_at_thresholds(self):
        stats = UserStats(questions=5, answers=10, accepted_answers=3)

        badges = UserService.get_badges(stats)

        assert [b.name for b in badges] == ["Curious", "Helper", "Expert"]
        assert badges[0].description == "Asked 5 or more questions"

    def test_single_badge(self):
        badges = UserService.get_badges(UserStats(accepted_answers=7))

        assert [b.name for b in badges] == ["Expert"]


class TestRecentActivity:
    @pytest.mark.asyncio
    async def test_merges_newest_first_and_limits(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user = make_user()
        other_question = await question_repo.save(
            make_question(UserId(uuid4()), title="Why is the sky blue?", created_at=at(0))
        )
        own = [
            await question_repo.save(make_question(user.id, title=f"Mine {i}", created_at=at(i)))
            for i in range(1, 5)
        ]
        answer = await answer_repo.save(
            make_answer(other_question.id, user.id, created_at=at(10))
        )
        comment = await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                author_id=user.id,
                content="Nice",
                answer_id=answer.id,
                created_at=at(11),
            )
        )

        # Act
        activity = await user_service.get_recent_activity(user.id, limit=5)

        # Assert - only the three newest questions are considered
        assert [item.id for item in activity] == [
            str(comment.id),
            str(answer.id),
            str(own[3].id),
            str(own[2].id),
            str(own[1].id),
        ]
        assert activity[0].type == ActivityType.COMMENT
        assert activity[0].title == "Comment on: Why is the sky blue?"
        assert activity[0].link == f"/questions/{other_question.id}"
        assert activity[1].title == "Answer to: Why is the sky blue?"
        assert activity[2].type == ActivityType.QUESTION
        assert activity[2].title == "Mine 4"

    @pytest.mark.asyncio
    async def test_empty_for_new_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_recent_activity(UserId(uuid4())) == []
