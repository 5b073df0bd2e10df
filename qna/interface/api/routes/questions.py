"""Question routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from qna.application.usecase.common import QuestionItem
from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qna.domain.error import DomainError
from qna.domain.service import JWTService
from qna.domain.value import QuestionSortOrder
from qna.interface.api.auth import require_user_id
from qna.interface.error import to_http_exception

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    content: str
    tags: list[str]
    images: list[str] = Field(default_factory=list)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted fields stay unchanged."""

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None
    images: Optional[list[str]] = None


@router.post("", response_model=QuestionItem, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionItem:
    """Ask a new question.

    Requires authentication.

    Args:
        request: Title, content, 1-5 tags and optional image URLs
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created question

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(jwt_service, auth_token, "Authentication required to ask questions")

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                content=request.content,
                tags=request.tags,
                images=request.images,
                user_id=user_id,
            )
        )
    except DomainError as e:
        logfire.warn("Question creation domain error", error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question",
        )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.LATEST),
    subject: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
) -> ListQuestionsResponse:
    """List questions.

    Args:
        list_questions_use_case: List questions use case from DI
        page: 1-based page number
        limit: Page size (1-100, default from settings)
        sort: "latest" (newest first) or "top" (highest net votes)
        subject: Only questions with this tag
        search: Case-insensitive match on title or content

    Returns:
        Questions on the page with answer counts and pagination totals
    """
    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                page=page, limit=limit, sort=sort, subject=subject, search=search
            )
        )
    except DomainError as e:
        logfire.warn("Question listing domain error", error=str(e))
        raise to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error listing questions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch questions",
        )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Get a question with its answers.

    Counts one view. Answers come accepted first, then by net votes.

    Raises:
        HTTPException: 404 if the question does not exist
    """
    try:
        return await get_question_use_case.execute(GetQuestionRequest(question_id=question_id))
    except DomainError as e:
        logfire.warn("Question fetch domain error", question_id=question_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error fetching question", question_id=question_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch question",
        )


@router.put("/{question_id}", response_model=QuestionItem)
async def update_question(
    question_id: str,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionItem:
    """Edit a question.

    Only the author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the question does not exist
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=question_id,
                user_id=user_id,
                title=request.title,
                content=request.content,
                tags=request.tags,
                images=request.images,
            )
        )
    except DomainError as e:
        logfire.warn("Question update domain error", question_id=question_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Question update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update question",
        )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: str,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its answers, replies, comments and votes.

    Only the author can delete.
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=question_id, user_id=user_id)
        )
    except DomainError as e:
        logfire.warn("Question delete domain error", question_id=question_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete question",
        )
