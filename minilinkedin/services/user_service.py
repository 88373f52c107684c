"""User profile service."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from minilinkedin.models.post import Post
from minilinkedin.models.user import User
from minilinkedin.services.pagination import Page, PageParams, paginate

logger = logging.getLogger(__name__)


def user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


class UserService:
    """Service for profile reads, profile edits and user discovery."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: str) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise user_not_found()
        return user

    def count_posts(self, user_id: str) -> int:
        """Number of posts authored by a user, computed at read time."""
        count = self.db.query(func.count(Post.id)).filter(Post.author_id == user_id).scalar()
        return count or 0

    def count_posts_by_author(self, user_ids: list[str]) -> dict[str, int]:
        """Post counts for many users in one grouped query."""
        if not user_ids:
            return {}
        counts = (
            self.db.query(Post.author_id, func.count(Post.id))
            .filter(Post.author_id.in_(user_ids))
            .group_by(Post.author_id)
            .all()
        )
        return dict(counts)

    def get_profile(self, user_id: str, posts_limit: int) -> tuple[User, list[Post], int]:
        """A user, their newest posts (at most `posts_limit`) and their total post count."""
        user = self.get_user(user_id)
        posts = (
            self.db.query(Post)
            .filter(Post.author_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .limit(posts_limit)
            .all()
        )
        return user, posts, self.count_posts(user_id)

    def update_profile(self, user_id: str, changes: dict) -> User:
        """Apply a partial update of name and/or bio.

        `changes` holds only the fields the caller sent, already trimmed and
        validated; an empty bio arrives as None.
        """
        user = self.get_user(user_id)
        for field in ("name", "bio"):
            if field in changes:
                setattr(user, field, changes[field])

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        logger.info(f"User {user_id} updated profile fields {sorted(changes)}")
        return user

    def list_users(self, params: PageParams) -> tuple[Page, dict[str, int]]:
        """Users newest first, with post counts for the returned page."""
        query = self.db.query(User).order_by(User.created_at.desc(), User.id.desc())
        page = paginate(query, params)
        return page, self.count_posts_by_author([user.id for user in page.items])
