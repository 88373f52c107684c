"""Authentication schemas."""

from pydantic import EmailStr, Field, field_validator

from minilinkedin.models.user import NAME_MIN_LENGTH
from minilinkedin.schemas.base import CamelModel
from minilinkedin.schemas.user import UserResponse


class UserRegister(CamelModel):
    """User registration request."""

    name: str = Field(..., max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=72)

    @field_validator("name")
    @classmethod
    def trim_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < NAME_MIN_LENGTH:
            raise ValueError(f"Name must be at least {NAME_MIN_LENGTH} characters")
        return value


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    message: str
    token: str
    user: UserResponse
