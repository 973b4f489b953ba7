"""Persistence Gateway — typed single-row access to the users and blogs tables.

Invariants:
    - One gateway per AsyncSession; the session is owned by the request scope (get_db)
    - ids are assigned by the database on insert; the incoming record id is discarded
    - Every write commits before returning
    - Expected misses are returned (None / WriteOutcome), never raised
    - replace/delete return CONFLICT when the row was read but matched 0 rows on write

Design Decisions:
    - Explicit per-kind mapping functions between wire records and ORM rows
    - Core UPDATE/DELETE statements after an existence read: the driver's rowcount
      is the vanish detector
"""

import logging
from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import EntityId, ResourceKind, WriteOutcome
from blog_api.db.base import Base
from blog_api.models.blog import Blog
from blog_api.models.user import User
from blog_api.schemas.blog import BlogRecord
from blog_api.schemas.user import UserRecord

logger = logging.getLogger(__name__)


# ─── Record <-> Row Mapping ──────────────────────────────────────

def user_to_record(row: User) -> UserRecord:
    return UserRecord(id=row.id, name=row.name, email=row.email)


def user_columns(record: UserRecord) -> dict[str, str]:
    return {"name": record.name, "email": record.email}


def blog_to_record(row: Blog) -> BlogRecord:
    return BlogRecord(id=row.id, title=row.title, content=row.content)


def blog_columns(record: BlogRecord) -> dict[str, str]:
    return {"title": record.title, "content": record.content}


@dataclass(frozen=True)
class EntityMapping:
    """How one ResourceKind is stored: ORM model plus both mapping directions."""
    model: type[Base]
    to_record: Callable[[Base], BaseModel]
    to_columns: Callable[[BaseModel], dict[str, str]]


MAPPINGS: dict[ResourceKind, EntityMapping] = {
    ResourceKind.USERS: EntityMapping(User, user_to_record, user_columns),
    ResourceKind.BLOGS: EntityMapping(Blog, blog_to_record, blog_columns),
}


# ─── Gateway ─────────────────────────────────────────────────────

class SqlAlchemyGateway:
    """EntityGateway implementation over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self, kind: ResourceKind) -> list[BaseModel]:
        mapping = MAPPINGS[kind]
        result = await self._db.execute(
            select(mapping.model).order_by(mapping.model.id),
        )
        return [mapping.to_record(row) for row in result.scalars().all()]

    async def get(
        self, kind: ResourceKind, entity_id: EntityId,
    ) -> BaseModel | None:
        mapping = MAPPINGS[kind]
        row = await self._fetch(mapping, entity_id)
        return mapping.to_record(row) if row is not None else None

    async def insert(self, kind: ResourceKind, record: BaseModel) -> BaseModel:
        mapping = MAPPINGS[kind]
        row = mapping.model(**mapping.to_columns(record))
        self._db.add(row)
        await self._db.commit()
        logger.debug(
            f"Inserted {kind.value} row",
            extra={"resource": kind.value, "entity_id": row.id},
        )
        return mapping.to_record(row)

    async def replace(
        self, kind: ResourceKind, entity_id: EntityId, record: BaseModel,
    ) -> WriteOutcome:
        mapping = MAPPINGS[kind]
        if await self._fetch(mapping, entity_id) is None:
            return WriteOutcome.NOT_FOUND

        result = await self._db.execute(
            update(mapping.model)
            .where(mapping.model.id == entity_id)
            .values(**mapping.to_columns(record)),
        )
        return await self._finish_write(kind, entity_id, result.rowcount)

    async def delete(
        self, kind: ResourceKind, entity_id: EntityId,
    ) -> WriteOutcome:
        mapping = MAPPINGS[kind]
        if await self._fetch(mapping, entity_id) is None:
            return WriteOutcome.NOT_FOUND

        result = await self._db.execute(
            delete(mapping.model).where(mapping.model.id == entity_id),
        )
        return await self._finish_write(kind, entity_id, result.rowcount)

    async def _fetch(self, mapping: EntityMapping, entity_id: EntityId):
        result = await self._db.execute(
            select(mapping.model)
            .where(mapping.model.id == entity_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def _finish_write(
        self, kind: ResourceKind, entity_id: EntityId, rowcount: int,
    ) -> WriteOutcome:
        if rowcount == 0:
            await self._db.rollback()
            logger.warning(
                f"{kind.label} {entity_id} vanished between read and write",
                extra={"resource": kind.value, "entity_id": entity_id},
            )
            return WriteOutcome.CONFLICT
        await self._db.commit()
        return WriteOutcome.OK
