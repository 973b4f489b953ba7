"""Blogs Routes — CRUD endpoints under /api/blogs, same contract as users.py."""

from fastapi import APIRouter, Depends, Request, Response, status

from blog_api.api.dependencies import EntityIdPath, get_gateway
from blog_api.core.domain_types import EntityId
from blog_api.infrastructure.gateway import SqlAlchemyGateway
from blog_api.schemas.blog import BlogRecord
from blog_api.services.resource_handlers import blogs

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogRecord])
async def list_blogs(gateway: SqlAlchemyGateway = Depends(get_gateway)):
    return await blogs.list_all(gateway)


@router.get("/{blog_id}", response_model=BlogRecord)
async def get_blog(
    blog_id: EntityIdPath, gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    return await blogs.get(gateway, EntityId(blog_id))


@router.post(
    "", response_model=BlogRecord, status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogRecord,
    request: Request,
    response: Response,
    gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    created = await blogs.create(gateway, body)
    response.headers["Location"] = str(
        request.url_for("get_blog", blog_id=created.id),
    )
    return created


@router.put("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_blog(
    blog_id: EntityIdPath,
    body: BlogRecord,
    gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    await blogs.update(gateway, EntityId(blog_id), body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: EntityIdPath, gateway: SqlAlchemyGateway = Depends(get_gateway),
):
    await blogs.delete(gateway, EntityId(blog_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
