"""
API error handling utilities.

Provides a decorator that maps application exceptions to HTTPExceptions
and registers the handler that reports malformed requests as 400.

Dependencies: fastapi, solarchat.core.exceptions
System role: Uniform error responses across routers
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from solarchat.core.exceptions import (
    GenerationError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


def handle_api_errors(func: F) -> F:
    """
    Decorator to transform application errors into HTTPExceptions.

    Maps ValidationError to 400, NotFoundError to 404, and GenerationError,
    PersistenceError and anything unexpected to 500. Internal error text
    is logged, never returned to the client.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except NotFoundError as e:
            logger.warning("Resource not found", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except GenerationError as e:
            logger.error("Reply generation failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except PersistenceError as e:
            logger.error("Persistence failure", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                f"Unexpected failure in {func.__name__}",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

    return wrapper  # type: ignore


def format_validation_errors(exc: RequestValidationError) -> str:
    """Summarize request validation errors as one readable sentence."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed bodies and path parameters as 400 Bad Request."""
    detail = format_validation_errors(exc)
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error": detail},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install application-wide exception handlers."""
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
