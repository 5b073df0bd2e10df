"""Answer domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qna.domain.model import Answer, Question
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def _get_question(self, question_id: QuestionId) -> Question:
        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Post an answer to a question.

        Args:
            question_id: Question being answered
            author_id: Author user ID
            content: Answer text

        Returns:
            Created answer

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            await self._get_question(question_id)

            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author_id,
                    content=content.strip(),
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.answer_repository.save(answer)
            logfire.info("Answer created", answer_id=str(saved.id), question_id=str(question_id))
            return saved

    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        """List a question's answers, oldest first.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("answer_service.list_answers", question_id=str(question_id)):
            await self._get_question(question_id)
            return await self.answer_repository.find_by_question(question_id)

    async def accept_answer(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Mark an answer as the accepted one for its question.

        Only the question's author may accept. Any previously accepted
        sibling is cleared in the same statement.

        Args:
            answer_id: Answer to accept
            user_id: Caller

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the caller is not the question's author
        """
        with logfire.span(
            "answer_service.accept_answer", answer_id=str(answer_id), user_id=str(user_id)
        ):
            answer = await self.get_answer(answer_id)
            question = await self._get_question(answer.question_id)
            if question.author_id != user_id:
                logfire.warn(
                    "Unauthorized accept attempt",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "question", str(question.id), str(user_id), action="accept answers on"
                )

            await self.answer_repository.set_accepted(question.id, answer_id)
            logfire.info("Answer accepted", answer_id=str(answer_id), question_id=str(question.id))
            return await self.get_answer(answer_id)

    async def unaccept_answer(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        """Withdraw acceptance of an answer.

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the caller is not the question's author
        """
        with logfire.span(
            "answer_service.unaccept_answer", answer_id=str(answer_id), user_id=str(user_id)
        ):
            answer = await self.get_answer(answer_id)
            question = await self._get_question(answer.question_id)
            if question.author_id != user_id:
                logfire.warn(
                    "Unauthorized unaccept attempt",
                    answer_id=str(answer_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "question", str(question.id), str(user_id), action="accept answers on"
                )

            if answer.accepted:
                await self.answer_repository.set_accepted(question.id, None)
                logfire.info("Answer unaccepted", answer_id=str(answer_id))
            return await self.get_answer(answer_id)
