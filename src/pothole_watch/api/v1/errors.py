"""Exception handlers translating domain errors into JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from pothole_watch.core.errors import AppError, DependencyError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


def render_error(exc: AppError) -> JSONResponse:
    """Build the JSON response for a domain error.

    Dependency failures are logged and reported without their message.
    """
    if isinstance(exc, DependencyError):
        logger.error("Dependency failure: %s", exc.message, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"error": GENERIC_ERROR})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = str(first.get("msg", "Invalid request")).removeprefix("Value error, ")
    fields = [str(part) for part in first.get("loc", ()) if part != "body"]
    if fields:
        return f"{'.'.join(fields)}: {message}"
    return message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return render_error(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema failures as 400s with the first problem described."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _describe_validation_error(exc)},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Unhandled database error on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
