"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EntityId wraps int; ids are assigned by the persistence gateway only
    - Every resource collection is named by a ResourceKind member
    - Gateway writes report a WriteOutcome instead of raising for expected misses

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: values double as URL segments and log fields
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", int)

# 32-bit signed range: ids outside it are rejected as invalid identifiers
MIN_ENTITY_ID = -(2**31)
MAX_ENTITY_ID = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """The two entity collections exposed by the API; value is the URL segment."""
    USERS = "users"
    BLOGS = "blogs"

    @property
    def label(self) -> str:
        """Singular display name used in error messages ("User", "Blog")."""
        return self.value[:-1].capitalize()


class WriteOutcome(str, Enum):
    """Result of a replace/delete against a single row."""
    OK = "ok"
    NOT_FOUND = "not_found"
    # Row was present on read but gone by the time the write flushed
    CONFLICT = "conflict"
