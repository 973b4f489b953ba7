"""Wire Schemas — Pydantic records for request and response bodies."""

from blog_api.schemas.user import UserRecord  # noqa: F401
from blog_api.schemas.blog import BlogRecord  # noqa: F401
