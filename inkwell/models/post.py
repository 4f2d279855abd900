"""Post ORM — a blog post with markdown content.

Invariants:
    - slug is globally unique (posts_slug_key)
    - title and content are non-nullable
    - is_published defaults to false (new posts are drafts)
    - updated_at is rewritten by every service update

Design Decisions:
    - Python-side timestamp defaults plus server defaults: rows inserted outside the
      ORM (migrations, psql) still get timestamps
    - categories is view-only: association rows are written explicitly by PostService
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.core.domain_types import POST_SLUG_MAX_LENGTH
from inkwell.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Post entity — title, markdown body and publication flag."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(
        String(POST_SLUG_MAX_LENGTH), nullable=False, unique=True,
    )
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    categories: Mapped[list["Category"]] = relationship(
        "Category",
        secondary="posts_categories",
        lazy="selectin",
        viewonly=True,
        order_by="Category.name",
    )
