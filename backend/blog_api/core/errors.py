"""Error Hierarchy — typed exceptions for every failure the API reports.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the flat {"error": message} envelope used by all error bodies
    - DomainError subclasses are reported directly; everything else is opaque (500)

Design Decisions:
    - Single hierarchy with BlogApiError base: handlers dispatch on DomainError only,
      infrastructure errors fall through to the error normalizer
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and log fields."""
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


INTERNAL_ERROR_MESSAGE = "Internal server error."


class BlogApiError(Exception):
    """Base exception for all Blog API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class DomainError(BlogApiError):
    """Caller-facing error whose message is safe to return."""


class UnauthorizedError(DomainError):
    """Missing or invalid credential."""
    def __init__(self):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED",
            ErrorCategory.AUTHENTICATION, 401,
        )


class IdMismatchError(DomainError):
    """Path id and body id disagree on update."""
    def __init__(self, path_id: int, body_id: int):
        super().__init__(
            "ID mismatch", "ID_MISMATCH", ErrorCategory.VALIDATION, 400,
        )
        self.path_id = path_id
        self.body_id = body_id


class RequestValidationFailed(DomainError):
    """Request body or path parameters failed schema validation."""
    def __init__(self, message: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )


class ResourceNotFoundError(DomainError):
    """Requested entity does not exist."""
    def __init__(self, resource_type: str, resource_id: int):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BlogApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
