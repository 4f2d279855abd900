"""Post Service — post CRUD plus posts_categories maintenance.

Invariants:
    - list_posts orders by created_at DESC, id DESC
    - create/update/delete each run in a single transaction (post row + association rows)
    - update: category_ids None → untouched, [] → cleared, non-empty → replace-all
    - delete removes association rows before the post row
    - get_by_id / get_by_slug return None for missing rows; update raises ResourceNotFoundError
    - Unknown category ids are rejected with ConstraintViolationError before any write
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.associations import (
    AssociationPlan, association_rows, plan_for_create, plan_for_update,
)
from inkwell.core.domain_types import CategoryId, PostId, PostStatus
from inkwell.core.errors import (
    ConstraintViolationError, ErrorContext, ResourceNotFoundError,
)
from inkwell.infrastructure.database import translate_storage_errors
from inkwell.models.category import Category
from inkwell.models.post import Post
from inkwell.models.post_category import PostCategory

logger = logging.getLogger(__name__)

_UNCHANGED = object()


class PostService:
    """Data access and mutations for posts."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Reads ───────────────────────────────────────────────────

    async def list_posts(
        self,
        status: PostStatus | None = None,
        category_id: int | None = None,
    ) -> list[Post]:
        """All posts, newest first, optionally filtered by status and category."""
        query = select(Post).order_by(Post.created_at.desc(), Post.id.desc())
        if status is not None:
            query = query.where(Post.is_published.is_(PostStatus(status).is_published))
        if category_id is not None:
            query = query.where(
                Post.id.in_(
                    select(PostCategory.post_id)
                    .where(PostCategory.category_id == category_id)
                ),
            )
        async with translate_storage_errors(self.db, "list posts", "post"):
            result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, post_id: int) -> Post | None:
        async with translate_storage_errors(self.db, "get post", "post"):
            result = await self.db.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Post | None:
        """Post with categories freshly loaded, or None."""
        async with translate_storage_errors(self.db, "get post by slug", "post"):
            result = await self.db.execute(
                select(Post)
                .where(Post.slug == slug)
                .execution_options(populate_existing=True),
            )
        return result.scalar_one_or_none()

    async def get_category_ids(self, post_id: int) -> list[int]:
        async with translate_storage_errors(self.db, "list post categories", "post"):
            result = await self.db.execute(
                select(PostCategory.category_id)
                .where(PostCategory.post_id == post_id)
                .order_by(PostCategory.category_id),
            )
        return list(result.scalars().all())

    # ─── Writes ──────────────────────────────────────────────────

    async def create(
        self,
        title: str,
        content: str,
        slug: str,
        category_ids: Sequence[int] | None = None,
        status: PostStatus | str | None = None,
        excerpt: str | None = None,
    ) -> Post:
        """Insert a post and its category associations in one transaction.

        is_published is true only when status is PUBLISHED. The returned post
        does not embed categories; use get_by_slug or get_category_ids.
        """
        plan = plan_for_create(category_ids)
        ctx = ErrorContext(resource_type="post", resource_id=slug)
        async with translate_storage_errors(self.db, "create post", "post", ctx):
            await self._ensure_categories_exist(plan.insert_ids)
            post = Post(
                title=title,
                content=content,
                slug=slug,
                excerpt=excerpt,
                is_published=status is not None and PostStatus(status).is_published,
            )
            self.db.add(post)
            await self.db.flush()
            await self._apply_plan(PostId(post.id), plan)
            await self.db.commit()
        await self.db.refresh(post)
        logger.info(
            f"Post created: {post.slug}",
            extra={"post_id": post.id, "slug": post.slug},
        )
        return post

    async def update(
        self,
        post_id: int,
        title: str,
        content: str,
        slug: str,
        category_ids: Sequence[int] | None = None,
        is_published: bool | None = None,
        excerpt: str | None | object = _UNCHANGED,
    ) -> Post:
        """Rewrite a post, stamp updated_at, and sync associations in one transaction.

        category_ids: None leaves associations alone, [] clears them, a list
        replaces them. is_published None keeps the current flag. excerpt is
        only written when passed.
        """
        post = await self.get_by_id(post_id)
        if post is None:
            raise ResourceNotFoundError("Post", str(post_id))

        plan = plan_for_update(category_ids)
        ctx = ErrorContext(resource_type="post", resource_id=str(post_id))
        async with translate_storage_errors(self.db, "update post", "post", ctx):
            await self._ensure_categories_exist(plan.insert_ids)
            post.title = title
            post.content = content
            post.slug = slug
            if is_published is not None:
                post.is_published = is_published
            if isinstance(excerpt, str) or excerpt is None:
                post.excerpt = excerpt or None
            post.updated_at = datetime.now(timezone.utc)
            await self.db.flush()
            await self._apply_plan(PostId(post.id), plan)
            await self.db.commit()
        await self.db.refresh(post)
        logger.info(
            f"Post updated: {post.slug}",
            extra={"post_id": post.id, "slug": post.slug},
        )
        return post

    async def delete(self, post_id: int) -> bool:
        """Delete association rows, then the post. True if a post row was removed."""
        ctx = ErrorContext(resource_type="post", resource_id=str(post_id))
        async with translate_storage_errors(self.db, "delete post", "post", ctx):
            await self.db.execute(
                delete(PostCategory).where(PostCategory.post_id == post_id),
            )
            result = await self.db.execute(delete(Post).where(Post.id == post_id))
            await self.db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Post {post_id} deleted", extra={"post_id": post_id})
        else:
            logger.info(f"Post {post_id} not found, nothing deleted", extra={"post_id": post_id})
        return deleted

    # ─── Helpers ─────────────────────────────────────────────────

    async def _ensure_categories_exist(self, category_ids: Sequence[CategoryId]) -> None:
        if not category_ids:
            return
        result = await self.db.execute(
            select(Category.id).where(Category.id.in_(category_ids)),
        )
        missing = set(category_ids) - set(result.scalars().all())
        if missing:
            raise ConstraintViolationError(
                f"Unknown category ids: {sorted(missing)}",
                "foreign_key",
                ErrorContext(resource_type="category", field_name="category_ids"),
            )

    async def _apply_plan(self, post_id: PostId, plan: AssociationPlan) -> None:
        if plan.clear_existing:
            await self.db.execute(
                delete(PostCategory).where(PostCategory.post_id == post_id),
            )
        rows = association_rows(post_id, plan)
        if rows:
            await self.db.execute(insert(PostCategory), rows)
