"""Category Routes — categories.list / create / getById / update / delete.

Invariants:
    - getById answers null (200) for a missing category; update answers 404
    - delete always answers {"success": true}
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.infrastructure.database import get_db
from inkwell.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from inkwell.schemas.common import DeleteResult
from inkwell.services.category_service import CategoryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(service: CategoryService = Depends(get_category_service)):
    """All categories, alphabetical by name."""
    return await service.list_categories()


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    """Create a category. 409 if the slug is taken."""
    return await service.create(
        name=body.name, slug=body.slug, description=body.description,
    )


@router.get("/{category_id}", response_model=CategoryResponse | None)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_by_id(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    """Update the supplied fields of a category."""
    return await service.update(category_id, **body.changes())


@router.delete("/{category_id}", response_model=DeleteResult)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
):
    """Delete a category and its post associations."""
    await service.delete(category_id)
    return DeleteResult()
