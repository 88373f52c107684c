"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from minilinkedin.database import Base
from minilinkedin.models.mixins import IdMixin, TimestampMixin

NAME_MIN_LENGTH = 2
BIO_MAX_LENGTH = 500


class User(Base, IdMixin, TimestampMixin):
    """User model for authentication, profiles and post ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    bio = Column(String(BIO_MAX_LENGTH), nullable=True)

    # Relationships
    posts = relationship("Post", back_populates="author")
