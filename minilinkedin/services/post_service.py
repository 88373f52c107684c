"""Post service: feed listings and author-only mutations."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from minilinkedin.models.mixins import utcnow
from minilinkedin.models.post import Post
from minilinkedin.models.user import User
from minilinkedin.services.access import ensure_owner
from minilinkedin.services.pagination import Page, PageParams, paginate

logger = logging.getLogger(__name__)

EDIT_FORBIDDEN = "You can only edit your own posts"
DELETE_FORBIDDEN = "You can only delete your own posts"


def post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


class PostService:
    """Service for creating, editing and listing posts."""

    def __init__(self, db: Session):
        self.db = db

    def _feed_query(self):
        """Posts with their authors, newest first."""
        return (
            self.db.query(Post)
            .options(selectinload(Post.author))
            .order_by(Post.created_at.desc(), Post.id.desc())
        )

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _get_owned_post(self, post_id: str, requester: User, forbidden_detail: str) -> Post:
        """Load a post for mutation: 404 when absent, 403 when not the author's."""
        post = self.db.query(Post).filter(Post.id == post_id).first()
        if post is None:
            raise post_not_found()
        ensure_owner(requester.id, post.author_id, forbidden_detail)
        return post

    def create_post(self, content: str, author: User) -> Post:
        """Publish a post. `content` is already trimmed and length-checked."""
        post = Post(content=content, author_id=author.id)
        self.db.add(post)
        self._commit()
        self.db.refresh(post)
        logger.info(f"User {author.id} created post {post.id}")
        return post

    def get_post(self, post_id: str) -> Post:
        post = (
            self.db.query(Post)
            .options(selectinload(Post.author))
            .filter(Post.id == post_id)
            .first()
        )
        if post is None:
            raise post_not_found()
        return post

    def update_post(self, post_id: str, content: str, requester: User) -> Post:
        """Replace a post's content. Only its author may do this."""
        post = self._get_owned_post(post_id, requester, EDIT_FORBIDDEN)

        # Affects no row if the post vanished after the ownership check
        updated = (
            self.db.query(Post)
            .filter(Post.id == post_id, Post.author_id == requester.id)
            .update({Post.content: content, Post.updated_at: utcnow()}, synchronize_session=False)
        )
        if not updated:
            self.db.rollback()
            raise post_not_found()
        self._commit()

        self.db.refresh(post)
        logger.info(f"User {requester.id} updated post {post_id}")
        return post

    def delete_post(self, post_id: str, requester: User) -> None:
        """Permanently remove a post. Only its author may do this."""
        self._get_owned_post(post_id, requester, DELETE_FORBIDDEN)

        deleted = (
            self.db.query(Post)
            .filter(Post.id == post_id, Post.author_id == requester.id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            self.db.rollback()
            raise post_not_found()
        self._commit()
        logger.info(f"User {requester.id} deleted post {post_id}")

    def list_posts(self, params: PageParams) -> Page:
        """Global feed."""
        return paginate(self._feed_query(), params)

    def list_user_posts(self, user_id: str, params: PageParams) -> Page:
        """One author's feed. Fails before querying posts if the user is unknown."""
        exists = self.db.query(User.id).filter(User.id == user_id).first()
        if exists is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return paginate(self._feed_query().filter(Post.author_id == user_id), params)
