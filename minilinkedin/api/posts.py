"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from minilinkedin.api.dependencies import get_current_user, get_page_params, get_post_service
from minilinkedin.models.user import User
from minilinkedin.schemas.base import MessageResponse
from minilinkedin.schemas.post import PostContent, PostEnvelope, PostListEnvelope, PostResponse
from minilinkedin.services.pagination import Page, PageParams
from minilinkedin.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


def post_list_envelope(message: str, page: Page) -> PostListEnvelope:
    return PostListEnvelope(
        message=message,
        posts=[PostResponse.model_validate(post) for post in page.items],
        pagination=page.metadata("total_posts"),
    )


@router.post("", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostContent,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a new post."""
    post = service.create_post(post_data.content, current_user)
    return PostEnvelope(message="Post created successfully", post=PostResponse.model_validate(post))


@router.get("", response_model=PostListEnvelope)
async def get_posts(
    params: Annotated[PageParams, Depends(get_page_params)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get all posts (public feed)."""
    return post_list_envelope("Posts retrieved successfully", service.list_posts(params))


@router.get("/user/{user_id}", response_model=PostListEnvelope)
async def get_user_posts(
    user_id: str,
    params: Annotated[PageParams, Depends(get_page_params)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get posts by a specific user."""
    page = service.list_user_posts(user_id, params)
    return post_list_envelope("User posts retrieved successfully", page)


@router.get("/{post_id}", response_model=PostEnvelope)
async def get_post(
    post_id: str,
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Get a single post by ID."""
    post = service.get_post(post_id)
    return PostEnvelope(message="Post retrieved successfully", post=PostResponse.model_validate(post))


@router.put("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: str,
    post_data: PostContent,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Update a post (author only)."""
    post = service.update_post(post_id, post_data.content, current_user)
    return PostEnvelope(message="Post updated successfully", post=PostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete a post (author only)."""
    service.delete_post(post_id, current_user)
    return MessageResponse(message="Post deleted successfully")
