"""The in-memory store follows the schema's ON DELETE CASCADE rules."""

from uuid import uuid4

import pytest

from qna.domain.model import Comment
from qna.domain.value import CommentId, UserId
from qna.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryQuestionRepository,
    InMemoryReplyRepository,
)
from tests.conftest import make_answer, make_question, make_reply


def _comment(**target) -> Comment:
    return Comment(id=CommentId(uuid4()), author_id=UserId(uuid4()), content="Noted", **target)


@pytest.mark.asyncio
async def test_answer_delete_removes_its_replies_and_comments():
    # Arrange
    db = InMemoryDatabase()
    questions = InMemoryQuestionRepository(db)
    answers = InMemoryAnswerRepository(db)
    replies = InMemoryReplyRepository(db)
    comments = InMemoryCommentRepository(db)
    question = await questions.save(make_question(UserId(uuid4())))
    answer = await answers.save(make_answer(question.id, UserId(uuid4())))
    reply = await replies.save(make_reply(answer.id, UserId(uuid4())))
    on_answer = await comments.save(_comment(answer_id=answer.id))
    on_question = await comments.save(_comment(question_id=question.id))

    # Act
    deleted = await answers.delete_by_question(question.id)

    # Assert - children of the answer go, the question's own comment stays
    assert deleted == [answer.id]
    assert await replies.find_by_id(reply.id) is None
    assert await comments.find_by_id(on_answer.id) is None
    assert await comments.find_by_id(on_question.id) is not None
    # Later lookups by answer find nothing left to return
    assert await replies.delete_by_answers(deleted) == []


@pytest.mark.asyncio
async def test_question_delete_removes_answers_and_comments():
    # Arrange
    db = InMemoryDatabase()
    questions = InMemoryQuestionRepository(db)
    answers = InMemoryAnswerRepository(db)
    comments = InMemoryCommentRepository(db)
    question = await questions.save(make_question(UserId(uuid4())))
    answer = await answers.save(make_answer(question.id, UserId(uuid4())))
    on_question = await comments.save(_comment(question_id=question.id))

    # Act
    await questions.delete(question.id)

    # Assert
    assert await answers.find_by_id(answer.id) is None
    assert await comments.find_by_id(on_question.id) is None
