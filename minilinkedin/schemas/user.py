"""User and profile schemas."""

from datetime import datetime

from pydantic import field_validator

from minilinkedin.models.user import BIO_MAX_LENGTH, NAME_MIN_LENGTH
from minilinkedin.schemas.base import CamelModel
from minilinkedin.schemas.pagination import UserPagination
from minilinkedin.schemas.post import PostSummary


class ProfileUpdate(CamelModel):
    """Partial profile update; fields left out of the body are not touched."""

    name: str | None = None
    bio: str | None = None

    @field_validator("name")
    @classmethod
    def trim_name(cls, value: str | None) -> str:
        value = (value or "").strip()
        if len(value) < NAME_MIN_LENGTH:
            raise ValueError(f"Name must be at least {NAME_MIN_LENGTH} characters")
        return value

    @field_validator("bio")
    @classmethod
    def trim_bio(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if len(value) > BIO_MAX_LENGTH:
            raise ValueError(f"Bio must not exceed {BIO_MAX_LENGTH} characters")
        return value or None


class UserResponse(CamelModel):
    """Public user fields."""

    id: str
    name: str
    email: str
    bio: str | None
    created_at: datetime


class UserProfileResponse(UserResponse):
    posts_count: int = 0


class UserDetailResponse(UserProfileResponse):
    posts: list[PostSummary] = []


class UpdatedUserResponse(UserResponse):
    updated_at: datetime


class UserEnvelope(CamelModel):
    message: str
    user: UserResponse


class UserProfileEnvelope(CamelModel):
    message: str
    user: UserProfileResponse


class UserDetailEnvelope(CamelModel):
    message: str
    user: UserDetailResponse


class UpdatedUserEnvelope(CamelModel):
    message: str
    user: UpdatedUserResponse


class UserListEnvelope(CamelModel):
    message: str
    users: list[UserProfileResponse]
    pagination: UserPagination
