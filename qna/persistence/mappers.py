"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Vote sets are not
part of any row; they are attached from the votes table by the services.
"""

from typing import Any, Dict
from uuid import UUID

from qna.domain.model import Answer, Comment, Question, Reply, User
from qna.domain.value import (
    AnswerId,
    CommentId,
    Email,
    QuestionId,
    ReplyId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=Email(row["email"]),
        image=row.get("image"),
        bio=row.get("bio") or "",
        location=row.get("location") or "",
        joined_at=row["joined_at"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model (empty vote sets)
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        tags=list(row["tags"]),
        author_id=UserId(_uuid(row["author_id"])),
        views=row["views"],
        images=list(row.get("images") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump(exclude={"upvotes", "downvotes"})


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        accepted=row["accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    return answer.model_dump(exclude={"upvotes", "downvotes"})


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    parent = _optional_uuid(row.get("parent_reply_id"))
    return Reply(
        id=ReplyId(_uuid(row["id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_reply_id=ReplyId(parent) if parent else None,
        created_at=row["created_at"],
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    return reply.model_dump(exclude={"upvotes", "downvotes"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    question_id = _optional_uuid(row.get("question_id"))
    answer_id = _optional_uuid(row.get("answer_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump(exclude={"upvotes", "downvotes"})
