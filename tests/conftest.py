"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import logfire
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("ENVIRONMENT", "test")

# No cloud sending and no console noise in test output
logfire.configure(send_to_logfire=False, console=False)

from qna.domain.model import Answer, Question, Reply, User  # noqa: E402
from qna.domain.value import (  # noqa: E402
    AnswerId,
    Email,
    QuestionId,
    ReplyId,
    UserId,
)
from qna.config import AuthSettings  # noqa: E402
from qna.domain.service import UserService  # noqa: E402
from qna.interface.api.app import create_app  # noqa: E402
from qna.util.jwt import create_token  # noqa: E402
from tests.di import build_test_container  # noqa: E402

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Deterministic timestamp, `minutes` after a fixed base."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(name: str = "Alice", email: Optional[str] = None) -> User:
    """Build a user with a unique email."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=Email(email or f"{name.lower()}-{user_id.hex[:8]}@example.com"),
    )


def make_question(
    author_id: UserId,
    title: str = "How do I reverse a list?",
    tags: Optional[list[str]] = None,
    created_at: Optional[datetime] = None,
    content: str = "Looking for the idiomatic way.",
) -> Question:
    """Build a question with sensible defaults."""
    created = created_at or datetime.now(timezone.utc)
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content=content,
        tags=tags or ["python"],
        author_id=author_id,
        created_at=created,
        updated_at=created,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = "Use reversed().",
    accepted: bool = False,
    created_at: Optional[datetime] = None,
) -> Answer:
    """Build an answer with sensible defaults."""
    created = created_at or datetime.now(timezone.utc)
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content=content,
        accepted=accepted,
        created_at=created,
        updated_at=created,
    )


def make_reply(
    answer_id: AnswerId,
    author_id: UserId,
    parent_reply_id: Optional[ReplyId] = None,
    content: str = "Good point.",
    created_at: Optional[datetime] = None,
) -> Reply:
    """Build a reply with sensible defaults."""
    return Reply(
        id=ReplyId(uuid4()),
        answer_id=answer_id,
        author_id=author_id,
        content=content,
        parent_reply_id=parent_reply_id,
        created_at=created_at or datetime.now(timezone.utc),
    )


@pytest_asyncio.fixture
async def container():
    """Test container with in-memory persistence, closed after the test."""
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client against an app served from the test container."""
    app_instance = create_app(container)
    async with AsyncClient(
        transport=ASGITransport(app=app_instance), base_url="http://test"
    ) as http_client:
        yield http_client


@pytest.fixture
def register_user(container):
    """Register a user and return it with a signed auth token."""

    async def _register(name: str) -> tuple[User, str]:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            user = await user_service.register_user(name, f"{name.lower()}@example.com")
        auth_settings = await container.get(AuthSettings)
        return user, create_token(str(user.id), user.name, auth_settings)

    return _register


def login(http_client: AsyncClient, token: str) -> None:
    """Send `token` as the auth cookie on subsequent requests."""
    http_client.cookies.set("auth_token", token)
