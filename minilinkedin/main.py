"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from minilinkedin.api import auth, posts, users
from minilinkedin.api.errors import register_exception_handlers
from minilinkedin.config import Settings, get_settings
from minilinkedin.database import Database

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application around an explicit settings object and storage handle.

    When no `database` is given one is opened from `settings.database_url` at
    startup and disposed at shutdown; a supplied one is left open for its owner.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        owns_database = database is None
        app.state.database = database or Database(settings.database_url)
        logger.info(f"MiniLinkedIn API started ({settings.environment})")
        yield
        if owns_database:
            app.state.database.dispose()

    app = FastAPI(
        title="MiniLinkedIn API",
        description="Minimal professional network: profiles and a shared post feed",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else settings.cors_origins,
        allow_credentials=not settings.is_development,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, expose_errors=settings.is_development)

    # Register routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(posts.router)

    @app.get("/")
    async def root():
        """Service banner."""
        return {"message": "MiniLinkedIn API", "version": API_VERSION, "status": "active"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
