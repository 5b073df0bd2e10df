"""Vote routes.

Every votable type shares the same toggle: voting the direction already
held removes it, voting the other direction switches.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from qna.application.usecase.common import VoteResult
from qna.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from qna.domain.error import DomainError
from qna.domain.service import JWTService
from qna.domain.value import VotableType
from qna.interface.api.auth import require_user_id
from qna.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for a vote click."""

    vote_type: str  # "up" or "down"


async def _cast_vote(
    votable_type: VotableType,
    votable_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> VoteResult:
    user_id = require_user_id(jwt_service, auth_token, "Authentication required to vote")

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                votable_type=votable_type,
                votable_id=votable_id,
                user_id=user_id,
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Vote domain error",
            votable_type=votable_type.value,
            votable_id=votable_id,
            error=str(e),
        )
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error(
            "Unexpected error voting",
            votable_type=votable_type.value,
            votable_id=votable_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process vote",
        )


@router.post("/questions/{question_id}/vote", response_model=VoteResult)
async def vote_question(
    question_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResult:
    """Upvote or downvote a question.

    Requires authentication.

    Args:
        question_id: Question UUID
        request: vote_type "up" or "down"
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Upvoter and downvoter IDs, net count and the caller's vote
    """
    return await _cast_vote(
        VotableType.QUESTION, question_id, request, cast_vote_use_case, jwt_service, auth_token
    )


@router.post("/answers/{answer_id}/vote", response_model=VoteResult)
async def vote_answer(
    answer_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResult:
    """Upvote or downvote an answer."""
    return await _cast_vote(
        VotableType.ANSWER, answer_id, request, cast_vote_use_case, jwt_service, auth_token
    )


@router.post("/replies/{reply_id}/vote", response_model=VoteResult)
async def vote_reply(
    reply_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResult:
    """Upvote or downvote a reply."""
    return await _cast_vote(
        VotableType.REPLY, reply_id, request, cast_vote_use_case, jwt_service, auth_token
    )


@router.post("/comments/{comment_id}/vote", response_model=VoteResult)
async def vote_comment(
    comment_id: str,
    request: VoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResult:
    """Like ("up") or dislike ("down") a comment."""
    return await _cast_vote(
        VotableType.COMMENT, comment_id, request, cast_vote_use_case, jwt_service, auth_token
    )
