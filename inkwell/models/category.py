"""Category ORM — a named, slugged grouping of posts.

Invariants:
    - slug is globally unique (categories_slug_key)
    - name is non-nullable, at most 100 characters in storage
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.core.domain_types import CATEGORY_NAME_MAX_LENGTH, CATEGORY_SLUG_MAX_LENGTH
from inkwell.db.base import Base


class Category(Base):
    """Category entity."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(CATEGORY_NAME_MAX_LENGTH), nullable=False,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(
        String(CATEGORY_SLUG_MAX_LENGTH), nullable=False, unique=True,
    )
