"""Comment routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from qna.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from qna.application.usecase.common import CommentItem
from qna.domain.error import DomainError
from qna.domain.service import JWTService
from qna.interface.api.auth import require_user_id
from qna.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on a question or an answer."""

    content: str
    question_id: Optional[str] = None
    answer_id: Optional[str] = None


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a comment on a question or an answer.

    Requires authentication. Exactly one of question_id and answer_id
    must be given.

    Raises:
        HTTPException: 401 if not authenticated, 400 on missing fields,
            404 if the target does not exist
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                content=request.content,
                question_id=request.question_id,
                answer_id=request.answer_id,
                user_id=user_id,
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation domain error", error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    question_id: Optional[str] = Query(default=None),
    answer_id: Optional[str] = Query(default=None),
) -> ListCommentsResponse:
    """List comments on a question or an answer, oldest first."""
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(question_id=question_id, answer_id=answer_id)
        )
    except DomainError as e:
        logfire.warn("Comment listing domain error", error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )
