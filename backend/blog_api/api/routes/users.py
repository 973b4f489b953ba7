"""Users Routes — CRUD endpoints under /api/users.

Invariants:
    - Path ids are integers; anything else fails validation with 400
    - POST returns 201 with a Location header pointing at GET /api/users/{id}
    - PUT and DELETE return 204 with an empty body
"""

from fastapi import APIRouter, Depends, Request, Response, status

from blog_api.api.dependencies import EntityIdPath, get_gateway
from blog_api.core.domain_types import EntityId
from blog_api.infrastructure.gateway import SqlAlchemyGateway
from blog_api.schemas.user import UserRecord
from blog_api.services.resource_handlers import users

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserRecord])
async def list_users(gateway: SqlAlchemyGateway = Depends(get_gateway)):
    return await users.list_all(gateway)


@router.get("/{user_id}", response_model=UserRecord)
async def get_user(
    user_id: EntityIdPath, gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    return await users.get(gateway, EntityId(user_id))


@router.post(
    "", response_model=UserRecord, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserRecord,
    request: Request,
    response: Response,
    gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    created = await users.create(gateway, body)
    response.headers["Location"] = str(
        request.url_for("get_user", user_id=created.id),
    )
    return created


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: EntityIdPath,
    body: UserRecord,
    gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    await users.update(gateway, EntityId(user_id), body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: EntityIdPath, gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    await users.delete(gateway, EntityId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
