"""User profile routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from qna.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from qna.domain.error import DomainError
from qna.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Args:
        user_id: User UUID
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        Profile fields, stats, badges and the five latest activity items

    Raises:
        HTTPException: If user not found

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "name": "Alice",
            "stats": {"questions": 6, "answers": 2, "accepted_answers": 1},
            "badges": [{"name": "Curious", "description": "Asked 5 or more questions"}],
            "recent_activity": [...]
        }
    """
    try:
        return await get_user_profile_use_case.execute(GetUserProfileRequest(user_id=user_id))
    except DomainError as e:
        logfire.warn("User profile domain error", user_id=user_id, error=str(e))
        raise to_http_exception(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error fetching user profile", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user profile",
        )
