"""User and profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from minilinkedin.api.dependencies import (
    get_app_settings,
    get_current_user,
    get_page_params,
    get_user_service,
)
from minilinkedin.config import Settings
from minilinkedin.models.user import User
from minilinkedin.schemas.post import PostSummary
from minilinkedin.schemas.user import (
    ProfileUpdate,
    UpdatedUserEnvelope,
    UpdatedUserResponse,
    UserDetailEnvelope,
    UserDetailResponse,
    UserListEnvelope,
    UserProfileEnvelope,
    UserProfileResponse,
)
from minilinkedin.services.pagination import PageParams
from minilinkedin.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/profile", response_model=UserProfileEnvelope)
async def get_own_profile(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user's profile."""
    user = service.get_user(current_user.id)

    profile = UserProfileResponse.model_validate(user)
    profile.posts_count = service.count_posts(user.id)
    return UserProfileEnvelope(message="Profile retrieved successfully", user=profile)


@router.put("/profile", response_model=UpdatedUserEnvelope)
async def update_own_profile(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Update current user's profile."""
    changes = profile_data.model_dump(exclude_unset=True)
    user = service.update_profile(current_user.id, changes)
    return UpdatedUserEnvelope(
        message="Profile updated successfully",
        user=UpdatedUserResponse.model_validate(user),
    )


@router.get("", response_model=UserListEnvelope)
async def get_users(
    params: Annotated[PageParams, Depends(get_page_params)],
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get all users (for discovery)."""
    page, post_counts = service.list_users(params)

    users = []
    for user in page.items:
        user_response = UserProfileResponse.model_validate(user)
        user_response.posts_count = post_counts.get(user.id, 0)
        users.append(user_response)

    return UserListEnvelope(
        message="Users retrieved successfully",
        users=users,
        pagination=page.metadata("total_users"),
    )


@router.get("/{user_id}", response_model=UserDetailEnvelope)
async def get_user_profile(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Get user profile by ID, with their newest posts."""
    user, posts, posts_count = service.get_profile(user_id, settings.profile_posts_limit)

    profile = UserProfileResponse.model_validate(user)
    return UserDetailEnvelope(
        message="User profile retrieved successfully",
        user=UserDetailResponse(
            **profile.model_dump(exclude={"posts_count"}),
            posts_count=posts_count,
            posts=[PostSummary.model_validate(post) for post in posts],
        ),
    )
