"""Answer routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from qna.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from qna.application.usecase.common import AnswerItem
from qna.domain.error import DomainError
from qna.domain.service import JWTService
from qna.interface.api.auth import require_user_id
from qna.interface.error import to_http_exception

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str
    question_id: str


@router.post("", response_model=AnswerItem, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerItem:
    """Answer a question.

    Requires authentication.

    Args:
        request: Answer content and the question being answered
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created answer

    Raises:
        HTTPException: 401 if not authenticated, 400 on empty content,
            404 if the question does not exist
    """
    user_id = require_user_id(jwt_service, auth_token, "Authentication required to answer")

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=request.question_id,
                content=request.content,
                user_id=user_id,
            )
        )
    except DomainError as e:
        logfire.warn("Answer creation domain error", error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Answer creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create answer",
        )


@router.get("", response_model=ListAnswersResponse)
async def list_answers(
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    question_id: str = Query(...),
) -> ListAnswersResponse:
    """List a question's answers, oldest first."""
    try:
        return await list_answers_use_case.execute(ListAnswersRequest(question_id=question_id))
    except DomainError as e:
        logfire.warn("Answer listing domain error", question_id=question_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing answers", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch answers",
        )


async def _set_accepted(
    answer_id: str,
    accepted: bool,
    accept_answer_use_case: AcceptAnswerUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> AnswerItem:
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(answer_id=answer_id, user_id=user_id, accepted=accepted)
        )
    except DomainError as e:
        logfire.warn(
            "Answer acceptance domain error",
            answer_id=answer_id,
            accepted=accepted,
            error=str(e),
        )
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error accepting answer", answer_id=answer_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update answer",
        )


@router.post("/{answer_id}/accept", response_model=AnswerItem)
async def accept_answer(
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerItem:
    """Mark an answer as accepted.

    Only the question's author may accept. Any other accepted answer on
    the same question is cleared.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the question's
            author, 404 if the answer does not exist
    """
    return await _set_accepted(answer_id, True, accept_answer_use_case, jwt_service, auth_token)


@router.delete("/{answer_id}/accept", response_model=AnswerItem)
async def unaccept_answer(
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerItem:
    """Withdraw acceptance of an answer (question author only)."""
    return await _set_accepted(answer_id, False, accept_answer_use_case, jwt_service, auth_token)
