"""Route Dependencies — per-request persistence gateway."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import MAX_ENTITY_ID, MIN_ENTITY_ID
from blog_api.infrastructure.database import get_db
from blog_api.infrastructure.gateway import SqlAlchemyGateway


async def get_gateway(db: AsyncSession = Depends(get_db)) -> SqlAlchemyGateway:
    """Gateway bound to this request's session; released with it."""
    return SqlAlchemyGateway(db)


# Path id bounded to the identifier range; out-of-range values fail validation (400)
EntityIdPath = Annotated[int, Path(ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID)]
