"""Boundary Protocols — contracts between resource handlers and persistence.

Invariants:
    - Handlers depend on EntityGateway, never on the SQLAlchemy implementation
    - Expected misses come back as None / WriteOutcome, not exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
"""

from typing import Protocol

from pydantic import BaseModel

from blog_api.core.domain_types import EntityId, ResourceKind, WriteOutcome


class EntityGateway(Protocol):
    """Contract for single-row entity persistence, implemented by infrastructure."""
    async def list_all(self, kind: ResourceKind) -> list[BaseModel]: ...
    async def get(self, kind: ResourceKind, entity_id: EntityId) -> BaseModel | None: ...
    async def insert(self, kind: ResourceKind, record: BaseModel) -> BaseModel: ...
    async def replace(
        self, kind: ResourceKind, entity_id: EntityId, record: BaseModel,
    ) -> WriteOutcome: ...
    async def delete(self, kind: ResourceKind, entity_id: EntityId) -> WriteOutcome: ...
