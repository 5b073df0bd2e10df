#!/usr/bin/env python3
"""Seed a development database with a few users and a question thread.

Prints an auth token for each seeded user so the API can be exercised
from a browser or curl (set it as the auth_token cookie).
"""

import asyncio
import sys

import logfire

from qna.config import Settings
from qna.domain.error import ConflictError
from qna.domain.service import (
    AnswerService,
    JWTService,
    QuestionService,
    ReplyService,
    UserService,
    VoteService,
)
from qna.domain.value import VotableType, VoteType
from qna.util.di.container import create_container
from qna.util.observability import configure_logfire

SEED_USERS = [
    ("Ada Lovelace", "ada@example.com"),
    ("Alan Turing", "alan@example.com"),
    ("Grace Hopper", "grace@example.com"),
]


async def seed() -> None:
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            question_service = await request_container.get(QuestionService)
            answer_service = await request_container.get(AnswerService)
            reply_service = await request_container.get(ReplyService)
            vote_service = await request_container.get(VoteService)
            jwt_service = await request_container.get(JWTService)

            users = []
            for name, email in SEED_USERS:
                try:
                    users.append(await user_service.register_user(name, email))
                except ConflictError:
                    logfire.warn("Seed aborted, users already exist", email=email)
                    return

            ada, alan, grace = users
            question = await question_service.create_question(
                author_id=ada.id,
                title="Can a machine think?",
                content="Looking for arguments on both sides.",
                tags=["philosophy", "computing"],
            )
            answer = await answer_service.create_answer(
                question.id, alan.id, "Replace the question with an imitation game."
            )
            reply = await reply_service.create_reply(
                answer.id, grace.id, "The game needs a clear protocol."
            )
            await reply_service.create_reply(
                answer.id, alan.id, "Agreed, see section 2.", parent_reply_id=reply.id
            )
            await vote_service.apply_vote(VotableType.ANSWER, answer.id, ada.id, VoteType.UP)
            await answer_service.accept_answer(answer.id, ada.id)

            for user in users:
                token = jwt_service.create_token(str(user.id), user.name)
                print(f"{user.name}: {token}")

            logfire.info("Database seeded", users=len(users), question_id=str(question.id))
    finally:
        await container.close()


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    if settings.environment == "production":
        logfire.error("Refusing to seed a production database")
        return 1

    asyncio.run(seed())
    return 0


if __name__ == "__main__":
    sys.exit(main())
