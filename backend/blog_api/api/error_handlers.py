"""Error Handlers — FastAPI exception handlers for caller-facing errors.

Invariants:
    - DomainError → {"error": message} with the error's own http_status
    - RequestValidationError → 400 naming the first offending field
    - Starlette HTTPException (unknown route, wrong verb) → {"error": detail}
    - Nothing else is handled here: unexpected exceptions reach the error normalizer

Design Decisions:
    - No catch-all Exception handler: the pipeline's outermost interceptor owns that boundary
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.core.errors import DomainError, RequestValidationFailed

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register caller-facing error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning(
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = build_validation_error(exc)
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def build_validation_error(exc: RequestValidationError) -> RequestValidationFailed:
    """Summarize pydantic errors into one message."""
    errors = exc.errors()
    if not errors:
        return RequestValidationFailed("Invalid request data")
    first = errors[0]
    field = ".".join(str(loc) for loc in first.get("loc", ()))
    return RequestValidationFailed(f"Invalid request data: {field}: {first.get('msg')}")
