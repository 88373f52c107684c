"""Post model."""

from sqlalchemy import Column, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from minilinkedin.database import Base
from minilinkedin.models.mixins import IdMixin, TimestampMixin

CONTENT_MAX_LENGTH = 2000


class Post(Base, IdMixin, TimestampMixin):
    """Short text post published to the feed."""

    __tablename__ = "posts"
    __table_args__ = (Index("ix_posts_author_id_created_at", "author_id", "created_at"),)

    content = Column(Text, nullable=False)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    # Relationships
    author = relationship("User", back_populates="posts")
