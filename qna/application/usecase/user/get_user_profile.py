"""Get user profile use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from qna.config import ListingSettings
from qna.domain.model import ActivityItem, Badge, UserStats
from qna.domain.service import UserService
from qna.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class GetUserProfileResponse(BaseModel):
    """Public user profile."""

    id: str
    name: str
    image: Optional[str]
    bio: str
    location: str
    joined_at: datetime
    stats: UserStats
    badges: list[Badge]
    recent_activity: list[ActivityItem]


class GetUserProfileUseCase:
    """Use case for a user's public profile page."""

    def __init__(self, user_service: UserService, listing_settings: ListingSettings) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            listing_settings: Recent activity feed length
        """
        self.user_service = user_service
        self.listing_settings = listing_settings

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Get user profile request

        Returns:
            Profile fields, contribution stats, badges and recent activity

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("get_user_profile.execute", user_id=request.user_id):
            user = await self.user_service.get_user(user_id)
            stats = await self.user_service.get_stats(user_id)
            activity = await self.user_service.get_recent_activity(
                user_id, limit=self.listing_settings.recent_activity_limit
            )

            return GetUserProfileResponse(
                id=str(user.id),
                name=user.name,
                image=user.image,
                bio=user.bio,
                location=user.location,
                joined_at=user.joined_at,
                stats=stats,
                badges=self.user_service.get_badges(stats),
                recent_activity=activity,
            )
