"""Diagnostics Route — a deliberately failing endpoint for exercising the error boundary.

Invariants:
    - Mounted only when settings.enable_diagnostics is true
    - Exempt from the authentication gate (settings.diagnostic_path)
    - Always raises; the caller sees only the normalized 500 envelope
"""

from fastapi import APIRouter


def build_router(path: str) -> APIRouter:
    router = APIRouter(tags=["diagnostics"])

    @router.get(path)
    async def throw():
        raise RuntimeError("Test exception")

    return router
