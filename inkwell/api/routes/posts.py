"""Post Routes — posts.list / getBySlug / getById / create / update / delete.

Invariants:
    - getById and getBySlug answer null (200) for a missing post; update answers 404
    - getBySlug embeds the post's categories; create/update/getById do not
    - delete always answers {"success": true}
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.domain_types import PostStatus
from inkwell.infrastructure.database import get_db
from inkwell.schemas.common import DeleteResult
from inkwell.schemas.post import (
    PostCreate, PostDetailResponse, PostResponse, PostUpdate,
)
from inkwell.services.post_service import PostService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    status_filter: PostStatus | None = Query(None, alias="status"),
    category_id: int | None = Query(None, ge=1),
    service: PostService = Depends(get_post_service),
):
    """Posts newest first, optionally only one status and/or one category."""
    return await service.list_posts(status=status_filter, category_id=category_id)


@router.get("/by-slug/{slug}", response_model=PostDetailResponse | None)
async def get_post_by_slug(
    slug: str, service: PostService = Depends(get_post_service),
):
    return await service.get_by_slug(slug)


@router.get("/{post_id}", response_model=PostResponse | None)
async def get_post(
    post_id: int, service: PostService = Depends(get_post_service),
):
    return await service.get_by_id(post_id)


@router.get("/{post_id}/categories", response_model=list[int])
async def get_post_category_ids(
    post_id: int, service: PostService = Depends(get_post_service),
):
    """Ids of the categories a post belongs to, ascending."""
    return await service.get_category_ids(post_id)


@router.post(
    "", response_model=PostResponse, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate, service: PostService = Depends(get_post_service),
):
    """Create a post and its category associations. 409 on duplicate slug."""
    return await service.create(
        title=body.title,
        content=body.content,
        slug=body.slug,
        category_ids=body.category_ids,
        status=body.status,
        excerpt=body.excerpt,
    )


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    body: PostUpdate,
    service: PostService = Depends(get_post_service),
):
    """Rewrite a post. Omitted categoryIds keep associations; [] clears them."""
    excerpt_change = body.model_dump(include={"excerpt"}, exclude_unset=True)
    return await service.update(
        post_id,
        title=body.title,
        content=body.content,
        slug=body.slug,
        category_ids=body.category_ids,
        is_published=body.is_published,
        **excerpt_change,
    )


@router.delete("/{post_id}", response_model=DeleteResult)
async def delete_post(
    post_id: int, service: PostService = Depends(get_post_service),
):
    """Delete a post and its category associations."""
    await service.delete(post_id)
    return DeleteResult()
