"""Resource Handlers — List/Get/Create/Update/Delete for one resource kind.

Invariants:
    - Update checks the id match before touching storage
    - NOT_FOUND and CONFLICT outcomes both surface as ResourceNotFoundError
    - Create discards the incoming id; the gateway assigns it
    - No cross-field validation: any string is accepted for any field
"""

import logging

from pydantic import BaseModel

from blog_api.core.domain_types import (
    EntityId, ResourceKind, WriteOutcome,
)
from blog_api.core.errors import IdMismatchError, ResourceNotFoundError
from blog_api.core.repository_protocols import EntityGateway

logger = logging.getLogger(__name__)


class ResourceHandler:
    """CRUD operations for a single ResourceKind."""

    def __init__(self, kind: ResourceKind):
        self.kind = kind

    def _not_found(self, entity_id: EntityId) -> ResourceNotFoundError:
        return ResourceNotFoundError(self.kind.label, entity_id)

    async def list_all(self, gateway: EntityGateway) -> list[BaseModel]:
        return await gateway.list_all(self.kind)

    async def get(
        self, gateway: EntityGateway, entity_id: EntityId,
    ) -> BaseModel:
        record = await gateway.get(self.kind, entity_id)
        if record is None:
            raise self._not_found(entity_id)
        return record

    async def create(
        self, gateway: EntityGateway, record: BaseModel,
    ) -> BaseModel:
        created = await gateway.insert(self.kind, record)
        logger.info(
            f"{self.kind.label} {created.id} created",
            extra={"resource": self.kind.value, "entity_id": created.id},
        )
        return created

    async def update(
        self, gateway: EntityGateway, entity_id: EntityId, record: BaseModel,
    ) -> None:
        if record.id != entity_id:
            raise IdMismatchError(entity_id, record.id)

        outcome = await gateway.replace(self.kind, entity_id, record)
        if outcome is not WriteOutcome.OK:
            # Concurrent removal reads the same as never-existed
            raise self._not_found(entity_id)

    async def delete(
        self, gateway: EntityGateway, entity_id: EntityId,
    ) -> None:
        outcome = await gateway.delete(self.kind, entity_id)
        if outcome is not WriteOutcome.OK:
            raise self._not_found(entity_id)
        logger.info(
            f"{self.kind.label} {entity_id} deleted",
            extra={"resource": self.kind.value, "entity_id": entity_id},
        )


users = ResourceHandler(ResourceKind.USERS)
blogs = ResourceHandler(ResourceKind.BLOGS)
