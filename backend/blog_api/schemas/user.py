"""User Schema — wire record for /api/users.

Invariants:
    - id is optional on input (defaults to 0) and overwritten by the gateway on create
    - name and email are required; any string is accepted (no format checks)
"""

from pydantic import BaseModel, Field

from blog_api.core.domain_types import MAX_ENTITY_ID, MIN_ENTITY_ID


class UserRecord(BaseModel):
    """User as sent and received over HTTP."""
    id: int = Field(0, ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID)
    name: str
    email: str
