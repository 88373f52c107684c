"""Post schemas."""

from datetime import datetime

from pydantic import field_validator

from minilinkedin.models.post import CONTENT_MAX_LENGTH
from minilinkedin.schemas.base import CamelModel
from minilinkedin.schemas.pagination import PostPagination

CONTENT_LENGTH_MESSAGE = f"Post content must be between 1 and {CONTENT_MAX_LENGTH} characters"


class PostContent(CamelModel):
    """Create or edit a post."""

    content: str

    @field_validator("content")
    @classmethod
    def trim_content(cls, value: str) -> str:
        value = value.strip()
        if not 1 <= len(value) <= CONTENT_MAX_LENGTH:
            raise ValueError(CONTENT_LENGTH_MESSAGE)
        return value


class AuthorResponse(CamelModel):
    """Public projection of a post's author."""

    id: str
    name: str
    email: str
    bio: str | None


class PostResponse(CamelModel):
    """Post with its author."""

    id: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: datetime
    author: AuthorResponse


class PostSummary(CamelModel):
    """Post embedded in a profile."""

    id: str
    content: str
    created_at: datetime
    updated_at: datetime


class PostEnvelope(CamelModel):
    message: str
    post: PostResponse


class PostListEnvelope(CamelModel):
    message: str
    posts: list[PostResponse]
    pagination: PostPagination
