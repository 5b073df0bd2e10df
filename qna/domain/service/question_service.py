"""Question domain service."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qna.domain.model import Question
from qna.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    ReplyRepository,
    VoteRepository,
)
from qna.domain.value import QuestionId, QuestionSortOrder, UserId, VotableType

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reply_repository: ReplyRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (cascading deletes)
            reply_repository: Reply repository (cascading deletes)
            comment_repository: Comment repository (cascading deletes)
            vote_repository: Vote repository (cascading deletes)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.reply_repository = reply_repository
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        content: str,
        tags: list[str],
        images: Optional[list[str]] = None,
    ) -> Question:
        """Create a new question.

        Args:
            author_id: Author user ID
            title: Question title
            content: Question body
            tags: Between 1 and 5 tags
            images: Optional image URLs

        Returns:
            Created question

        Raises:
            ValidationError: If any field is missing or malformed
        """
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title.strip(),
                    content=content.strip(),
                    tags=tags,
                    author_id=author_id,
                    images=images or [],
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid question", author_id=str(author_id), error=str(e))
                raise ValidationError.from_pydantic(e)

            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id), tags=saved.tags)
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def view_question(self, question_id: QuestionId) -> Question:
        """Record a view and return the question.

        The counter is bumped with a single atomic increment.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.view_question", question_id=str(question_id)):
            views = await self.question_repository.increment_views(question_id)
            if views is None:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return await self.get_question(question_id)

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        subject: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Question], int]:
        """List one page of questions.

        Args:
            sort: LATEST or TOP
            subject: Tag filter
            search: Case-insensitive text filter on title and content
            page: 1-based page number
            limit: Page size

        Returns:
            Tuple of (questions on the page, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            subject=subject,
            search=search,
            page=page,
            limit=limit,
        ):
            if page < 1:
                raise ValidationError("page must be at least 1")
            if limit < 1:
                raise ValidationError("limit must be at least 1")

            subject = subject.strip() if subject else None
            search = search.strip() if search else None

            questions = await self.question_repository.find_all(
                sort=sort,
                subject=subject or None,
                search=search or None,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.question_repository.count(
                subject=subject or None, search=search or None
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def update_question(
        self,
        question_id: QuestionId,
        user_id: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[list[str]] = None,
        images: Optional[list[str]] = None,
    ) -> Question:
        """Edit a question. Only its author may do this.

        Fields left as None are unchanged.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If an edited field is malformed
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != user_id:
                logfire.warn(
                    "Unauthorized question edit",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("question", str(question_id), str(user_id))

            changes: dict = {"updated_at": datetime.now(timezone.utc)}
            if title is not None:
                changes["title"] = title.strip()
            if content is not None:
                changes["content"] = content.strip()
            if tags is not None:
                changes["tags"] = tags
            if images is not None:
                changes["images"] = images

            try:
                updated = Question.model_validate({**question.model_dump(), **changes})
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId, user_id: UserId) -> None:
        """Delete a question and everything hanging off it.

        Removes its answers, their replies, comments on the question or its
        answers, and the vote rows of all of them.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != user_id:
                logfire.warn(
                    "Unauthorized question delete",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "question", str(question_id), str(user_id), action="delete"
                )

            # Leaf-first: the answer FKs cascade to replies and comments, and
            # their ids are needed to clear vote rows.
            answers = await self.answer_repository.find_by_question(question_id)
            answer_ids = [a.id for a in answers]
            reply_ids = await self.reply_repository.delete_by_answers(answer_ids)
            comment_ids = await self.comment_repository.delete_by_targets(
                question_ids=[question_id], answer_ids=answer_ids
            )

            votables: list[tuple[VotableType, list[UUID]]] = [
                (VotableType.QUESTION, [question_id]),
                (VotableType.ANSWER, list(answer_ids)),
                (VotableType.REPLY, list(reply_ids)),
                (VotableType.COMMENT, list(comment_ids)),
            ]
            for votable_type, ids in votables:
                if ids:
                    await self.vote_repository.delete_by_votables(votable_type, ids)

            await self.answer_repository.delete_by_question(question_id)
            await self.question_repository.delete(question_id)
            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers=len(answer_ids),
                replies=len(reply_ids),
                comments=len(comment_ids),
            )
