"""Category Service — category CRUD.

Invariants:
    - list_categories orders by name ASC (id breaks ties)
    - delete removes the category's association rows before the category, in one transaction
    - update changes only the fields it is given
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.errors import (
    ErrorContext, InputValidationError, ResourceNotFoundError,
)
from inkwell.infrastructure.database import translate_storage_errors
from inkwell.models.category import Category
from inkwell.models.post_category import PostCategory

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset({"name", "slug", "description"})


class CategoryService:
    """Data access and mutations for categories."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self) -> list[Category]:
        async with translate_storage_errors(self.db, "list categories", "category"):
            result = await self.db.execute(
                select(Category).order_by(Category.name.asc(), Category.id.asc()),
            )
        return list(result.scalars().all())

    async def get_by_id(self, category_id: int) -> Category | None:
        async with translate_storage_errors(self.db, "get category", "category"):
            result = await self.db.execute(
                select(Category).where(Category.id == category_id),
            )
        return result.scalar_one_or_none()

    async def create(
        self, name: str, slug: str, description: str | None = None,
    ) -> Category:
        """Insert a category. Duplicate slug → ConstraintViolationError."""
        ctx = ErrorContext(resource_type="category", resource_id=slug)
        async with translate_storage_errors(self.db, "create category", "category", ctx):
            category = Category(name=name, slug=slug, description=description)
            self.db.add(category)
            await self.db.commit()
        await self.db.refresh(category)
        logger.info(
            f"Category created: {category.slug}",
            extra={"category_id": category.id, "slug": category.slug},
        )
        return category

    async def update(self, category_id: int, **fields: object) -> Category:
        """Apply a partial update (name, slug, description)."""
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise InputValidationError(
                f"Cannot update category fields: {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        category = await self.get_by_id(category_id)
        if category is None:
            raise ResourceNotFoundError("Category", str(category_id))

        ctx = ErrorContext(resource_type="category", resource_id=str(category_id))
        async with translate_storage_errors(self.db, "update category", "category", ctx):
            for name, value in fields.items():
                setattr(category, name, value)
            await self.db.commit()
        await self.db.refresh(category)
        logger.info(
            f"Category {category_id} updated ({', '.join(sorted(fields)) or 'no fields'})",
            extra={"category_id": category_id},
        )
        return category

    async def delete(self, category_id: int) -> bool:
        """Delete association rows, then the category. True if a row was removed."""
        ctx = ErrorContext(resource_type="category", resource_id=str(category_id))
        async with translate_storage_errors(self.db, "delete category", "category", ctx):
            await self.db.execute(
                delete(PostCategory).where(PostCategory.category_id == category_id),
            )
            result = await self.db.execute(
                delete(Category).where(Category.id == category_id),
            )
            await self.db.commit()
        deleted = result.rowcount > 0
        logger.info(
            f"Category {category_id} {'deleted' if deleted else 'not found'}",
            extra={"category_id": category_id},
        )
        return deleted
