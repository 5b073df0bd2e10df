"""Unit tests for row <-> domain model mappers."""

from uuid import uuid4

from qna.domain.value import UserId
from qna.persistence.mappers import (
    comment_to_dict,
    question_to_dict,
    row_to_comment,
    row_to_question,
    row_to_reply,
    user_to_dict,
)
from tests.conftest import at, make_question, make_user


class TestQuestionMapping:
    def test_dict_excludes_vote_sets(self):
        question = make_question(UserId(uuid4())).model_copy(
            update={"upvotes": frozenset({UserId(uuid4())})}
        )

        row = question_to_dict(question)

        assert "upvotes" not in row
        assert "downvotes" not in row
        assert row["tags"] == ["python"]

    def test_row_with_string_ids(self):
        question_id, author_id = uuid4(), uuid4()
        row = {
            "id": str(question_id),
            "title": "Title",
            "content": "Body",
            "tags": ("a", "b"),
            "author_id": str(author_id),
            "views": 7,
            "images": None,
            "created_at": at(0),
            "updated_at": at(1),
        }

        question = row_to_question(row)

        assert question.id == question_id
        assert question.author_id == author_id
        assert question.tags == ["a", "b"]
        assert question.images == []
        assert question.vote_count == 0


class TestOtherMappings:
    def test_top_level_reply_has_no_parent(self):
        row = {
            "id": uuid4(),
            "answer_id": uuid4(),
            "author_id": uuid4(),
            "content": "Hi",
            "parent_reply_id": None,
            "created_at": at(0),
        }

        assert row_to_reply(row).is_top_level

    def test_comment_keeps_single_target(self):
        question_id = uuid4()
        row = {
            "id": uuid4(),
            "author_id": uuid4(),
            "content": "Hi",
            "question_id": question_id,
            "answer_id": None,
            "created_at": at(0),
        }

        data = comment_to_dict(row_to_comment(row))

        assert data["question_id"] == question_id
        assert data["answer_id"] is None

    def test_user_email_is_stored_as_plain_string(self):
        user = make_user("Ada", email="Ada@Example.com")

        assert user_to_dict(user)["email"] == "ada@example.com"
