"""Pydantic schemas for API requests and responses."""

from minilinkedin.schemas.auth import AuthResponse, UserLogin, UserRegister
from minilinkedin.schemas.base import MessageResponse
from minilinkedin.schemas.pagination import PostPagination, UserPagination
from minilinkedin.schemas.post import (
    AuthorResponse,
    PostContent,
    PostEnvelope,
    PostListEnvelope,
    PostResponse,
    PostSummary,
)
from minilinkedin.schemas.user import (
    ProfileUpdate,
    UpdatedUserEnvelope,
    UpdatedUserResponse,
    UserDetailEnvelope,
    UserDetailResponse,
    UserEnvelope,
    UserListEnvelope,
    UserProfileEnvelope,
    UserProfileResponse,
    UserResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "MessageResponse",
    "PostPagination",
    "UserPagination",
    "PostContent",
    "AuthorResponse",
    "PostResponse",
    "PostSummary",
    "PostEnvelope",
    "PostListEnvelope",
    "ProfileUpdate",
    "UserResponse",
    "UserProfileResponse",
    "UserDetailResponse",
    "UpdatedUserResponse",
    "UserEnvelope",
    "UserProfileEnvelope",
    "UserDetailEnvelope",
    "UpdatedUserEnvelope",
    "UserListEnvelope",
]
