"""SQLAlchemy models."""

from minilinkedin.models.post import Post
from minilinkedin.models.user import User

__all__ = [
    "User",
    "Post",
]
