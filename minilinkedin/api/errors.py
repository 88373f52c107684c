"""Exception handlers rendering every failure as a `{message, errors?}` envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTER_NOT_FOUND_DETAIL = "Not Found"


def _format_validation_error(error: dict) -> dict:
    """One `{field, message}` entry per failed field."""
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    ctx_error = error.get("ctx", {}).get("error")
    message = str(ctx_error) if isinstance(ctx_error, ValueError) else error.get("msg", "")
    return {"field": ".".join(location), "message": message}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail
    # Raised by the router itself when no route matches the path
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == ROUTER_NOT_FOUND_DETAIL:
        detail = "Route not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation failed",
            "errors": [_format_validation_error(error) for error in exc.errors()],
        },
    )


def register_exception_handlers(app: FastAPI, expose_errors: bool) -> None:
    """Install the envelope handlers; `expose_errors` leaks 500 details (development only)."""

    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        content = {"message": "Something went wrong!"}
        if expose_errors:
            content["error"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
