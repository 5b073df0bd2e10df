"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from qna.domain.error import NotFoundError, ValidationError
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.service import CommentService
from qna.domain.value import AnswerId, QuestionId, UserId
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_comment_on_question(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))

        # Act
        comment = await comment_service.create_comment(
            UserId(uuid4()), "Could you share the traceback?", question_id=question.id
        )

        # Assert
        assert comment.question_id == question.id
        assert comment.answer_id is None
        assert comment.like_count == 0
        assert await comment_service.list_comments(question_id=question.id) == [comment]

    @pytest.mark.asyncio
    async def test_comment_on_answer(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        answer = await answer_repo.save(make_answer(question.id, UserId(uuid4())))

        # Act
        comment = await comment_service.create_comment(
            UserId(uuid4()), "This worked for me", answer_id=answer.id
        )

        # Assert
        assert await comment_service.list_comments(answer_id=answer.id) == [comment]
        assert await comment_service.list_comments(question_id=question.id) == []

    @pytest.mark.asyncio
    async def test_requires_exactly_one_target(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="Exactly one"):
            await comment_service.create_comment(UserId(uuid4()), "Orphan")
        with pytest.raises(ValidationError, match="Exactly one"):
            await comment_service.create_comment(
                UserId(uuid4()),
                "Both",
                question_id=QuestionId(uuid4()),
                answer_id=AnswerId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))

        with pytest.raises(ValidationError, match="Content is required"):
            await comment_service.create_comment(UserId(uuid4()), " ", question_id=question.id)

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Answer not found"):
            await comment_service.create_comment(
                UserId(uuid4()), "Hello", answer_id=AnswerId(uuid4())
            )
