"""Pipeline Interceptors — the stages run by PipelineMiddleware, outermost first.

Invariants:
    - normalize_errors never lets an exception escape; callers only ever see a 500 envelope
    - The authentication gate keeps no state between requests
    - The exempt diagnostic path matches by segment: the path itself or anything beneath it
    - Nothing is exempt unless the diagnostic route is mounted
    - Request logging records method, path, status_code and duration_ms
"""

import logging
import time

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.requests import Request
from starlette.responses import Response

from blog_api.api.pipeline import CallNext, Interceptor
from blog_api.config import Settings
from blog_api.core.errors import INTERNAL_ERROR_MESSAGE, UnauthorizedError

logger = logging.getLogger(__name__)


async def normalize_errors(request: Request, call_next: CallNext) -> Response:
    """Outermost stage: any downstream failure becomes an opaque 500."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "method": request.method,
                "path": request.url.path,
                "error_code": "INTERNAL_ERROR",
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _is_under(path: str, prefix: str) -> bool:
    path, prefix = path.lower(), prefix.rstrip("/").lower()
    return path == prefix or path.startswith(prefix + "/")


class AuthenticationGate:
    """Forwards requests carrying the shared-secret bearer token, rejects the rest."""

    def __init__(self, token: str, exempt_path: str | None = None):
        self.expected = f"Bearer {token}"
        self.exempt_path = exempt_path

    def is_authorized(self, request: Request) -> bool:
        if self.exempt_path and _is_under(request.url.path, self.exempt_path):
            return True
        return request.headers.get("authorization") == self.expected

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        if not self.is_authorized(request):
            error = UnauthorizedError()
            logger.warning(
                f"Rejected unauthenticated request to {request.url.path}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error_code": error.code,
                },
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return await call_next(request)


async def log_requests(request: Request, call_next: CallNext) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


def build_interceptors(settings: Settings) -> list[Interceptor]:
    """Pipeline stages in execution order, outermost first."""
    return [
        normalize_errors,
        AuthenticationGate(
            settings.api_token,
            settings.diagnostic_path if settings.enable_diagnostics else None,
        ),
        log_requests,
    ]
