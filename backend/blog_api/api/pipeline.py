"""Request Pipeline — ordered interceptors composed as a chain of responsibility.

Invariants:
    - An interceptor takes (request, call_next) and returns a Response
    - The first interceptor in the list is the outermost stage
    - An interceptor that returns without calling call_next short-circuits the rest

Design Decisions:
    - One BaseHTTPMiddleware runs the whole composed chain: stage order lives in a
      plain list instead of in add_middleware registration order
"""

from typing import Awaitable, Callable, Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

CallNext = Callable[[Request], Awaitable[Response]]
Interceptor = Callable[[Request, CallNext], Awaitable[Response]]


def _bind(interceptor: Interceptor, call_next: CallNext) -> CallNext:
    async def stage(request: Request) -> Response:
        return await interceptor(request, call_next)
    return stage


def compose(interceptors: Sequence[Interceptor], endpoint: CallNext) -> CallNext:
    """Fold interceptors around endpoint; interceptors[0] runs first."""
    handler = endpoint
    for interceptor in reversed(interceptors):
        handler = _bind(interceptor, handler)
    return handler


class PipelineMiddleware(BaseHTTPMiddleware):
    """Runs the interceptor chain around the routed application."""

    def __init__(self, app: ASGIApp, interceptors: Sequence[Interceptor]):
        super().__init__(app)
        self.interceptors = tuple(interceptors)

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        return await compose(self.interceptors, call_next)(request)
