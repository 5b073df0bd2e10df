"""Unit tests for question use cases."""

from uuid import uuid4

import pytest

from qna.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from qna.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from qna.domain.value import UserId
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListQuestionsUseCase:
    @pytest.mark.asyncio
    async def test_page_size_defaults_and_totals(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user("Alice"))
        for i in range(12):
            await question_repo.save(make_question(author.id, title=f"Q{i}", created_at=at(i)))

        # Act
        response = await use_case.execute(ListQuestionsRequest())

        # Assert - default page size is 10
        assert response.total == 12
        assert response.total_pages == 2
        assert response.current_page == 1
        assert len(response.questions) == 10
        assert response.questions[0].title == "Q11"
        assert response.questions[0].author.name == "Alice"

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(make_question(UserId(uuid4())))

        # Act
        response = await use_case.execute(ListQuestionsRequest(limit=1000))

        # Assert
        assert response.total_pages == 1
        assert response.questions[0].author.name == "Unknown user"

    @pytest.mark.asyncio
    async def test_empty_listing(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)

        response = await use_case.execute(ListQuestionsRequest(page=3))

        assert response.questions == []
        assert response.total == 0
        assert response.total_pages == 0
        assert response.current_page == 3

    @pytest.mark.asyncio
    async def test_answer_counts_merged(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        await answer_repo.save(make_answer(question.id, UserId(uuid4())))
        await answer_repo.save(make_answer(question.id, UserId(uuid4())))

        # Act
        response = await use_case.execute(ListQuestionsRequest())

        # Assert
        assert response.questions[0].answer_count == 2


class TestGetQuestionUseCase:
    @pytest.mark.asyncio
    async def test_accepted_answer_ranked_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question(UserId(uuid4())))
        older = await answer_repo.save(make_answer(question.id, UserId(uuid4()), created_at=at(1)))
        accepted = await answer_repo.save(
            make_answer(question.id, UserId(uuid4()), accepted=True, created_at=at(2))
        )

        # Act
        response = await use_case.execute(GetQuestionRequest(question_id=str(question.id)))

        # Assert
        assert [a.id for a in response.answers] == [str(accepted.id), str(older.id)]
        assert response.question.views == 1
        assert response.question.answer_count == 2
