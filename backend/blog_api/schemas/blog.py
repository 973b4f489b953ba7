"""Blog Schema — wire record for /api/blogs.

Invariants:
    - id is optional on input (defaults to 0) and overwritten by the gateway on create
    - title and content are required; any string is accepted
"""

from pydantic import BaseModel, Field

from blog_api.core.domain_types import MAX_ENTITY_ID, MIN_ENTITY_ID


class BlogRecord(BaseModel):
    """Blog as sent and received over HTTP."""
    id: int = Field(0, ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID)
    title: str
    content: str
