"""Reply routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from qna.application.usecase.common import ReplyItem
from qna.application.usecase.reply import (
    CreateReplyRequest,
    CreateReplyResponse,
    CreateReplyUseCase,
    GetReplyTreeRequest,
    GetReplyTreeResponse,
    GetReplyTreeUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)
from qna.domain.error import DomainError
from qna.domain.service import JWTService
from qna.interface.api.auth import require_user_id
from qna.interface.error import to_http_exception

router = APIRouter(prefix="/answers", tags=["replies"], route_class=DishkaRoute)


class CreateReplyAPIRequest(BaseModel):
    """API request for replying to an answer or a reply."""

    content: str
    parent_reply_id: Optional[str] = None


@router.get("/{answer_id}/replies", response_model=list[ReplyItem])
async def list_replies(
    answer_id: str,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    parent_reply_id: Optional[str] = Query(default=None),
) -> list[ReplyItem]:
    """List replies under an answer, newest first.

    Without parent_reply_id only top-level replies are returned; with it,
    only the direct children of that reply.

    Args:
        answer_id: Answer UUID
        list_replies_use_case: List replies use case from DI
        parent_reply_id: Optional parent reply UUID

    Returns:
        Replies with author name and image

    Raises:
        HTTPException: 404 if the answer does not exist
    """
    try:
        return await list_replies_use_case.execute(
            ListRepliesRequest(answer_id=answer_id, parent_reply_id=parent_reply_id)
        )
    except DomainError as e:
        logfire.warn("Reply listing domain error", answer_id=answer_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing replies", answer_id=answer_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch replies",
        )


@router.get("/{answer_id}/replies/tree", response_model=GetReplyTreeResponse)
async def get_reply_tree(
    answer_id: str,
    get_reply_tree_use_case: FromDishka[GetReplyTreeUseCase],
) -> GetReplyTreeResponse:
    """Get every reply under an answer as a nested tree."""
    try:
        return await get_reply_tree_use_case.execute(GetReplyTreeRequest(answer_id=answer_id))
    except DomainError as e:
        logfire.warn("Reply tree domain error", answer_id=answer_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error building reply tree", answer_id=answer_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch replies",
        )


@router.post(
    "/{answer_id}/replies",
    response_model=CreateReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    answer_id: str,
    request: CreateReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateReplyResponse:
    """Reply to an answer, or to another reply via parent_reply_id.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 on empty content or a
            parent from another answer, 404 if answer or parent is missing
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                answer_id=answer_id,
                content=request.content,
                parent_reply_id=request.parent_reply_id,
                user_id=user_id,
            )
        )
    except DomainError as e:
        logfire.warn("Reply creation domain error", answer_id=answer_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Reply creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating reply", answer_id=answer_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create reply",
        )
