"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from minilinkedin.api.dependencies import get_app_settings, get_current_user
from minilinkedin.config import Settings
from minilinkedin.database import get_db
from minilinkedin.models.user import User
from minilinkedin.schemas.auth import AuthResponse, UserLogin, UserRegister
from minilinkedin.schemas.user import UserEnvelope, UserResponse
from minilinkedin.services.auth import authenticate_user, create_access_token, create_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Register a new user."""
    user = create_user(db, user_data.email, user_data.password, user_data.name)

    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user.id, user.email, settings),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id, user.email, settings),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserEnvelope)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return UserEnvelope(
        message="User retrieved successfully",
        user=UserResponse.model_validate(current_user),
    )
