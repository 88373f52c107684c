"""FastAPI dependencies for authentication, database and pagination."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from minilinkedin.config import Settings
from minilinkedin.database import get_db
from minilinkedin.models.user import User
from minilinkedin.services.auth import decode_access_token
from minilinkedin.services.pagination import MAX_PAGE, PageParams, build_page_params
from minilinkedin.services.post_service import PostService
from minilinkedin.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def _unauthorized(detail: str = "Invalid authentication credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise _unauthorized("Access token required")

    payload = decode_access_token(credentials.credentials, settings)
    if payload is None:
        raise _unauthorized()

    user_id = payload.get("sub")
    if user_id is None:
        raise _unauthorized()

    user = db.query(User).filter(User.id == str(user_id)).first()
    if user is None:
        raise _unauthorized("User not found")

    return user


def get_page_params(
    settings: Annotated[Settings, Depends(get_app_settings)],
    page: Annotated[int, Query(ge=1, le=MAX_PAGE)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
) -> PageParams:
    """Validated page/limit query parameters."""
    return build_page_params(page, limit, settings.default_page_limit, settings.max_page_limit)


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(db)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)
