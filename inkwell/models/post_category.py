"""PostCategory ORM — join row linking one post to one category.

Invariants:
    - Both foreign keys cascade on delete at the storage layer
    - (post_id, category_id) is unique: a post is in a category at most once
"""

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.db.base import Base


class PostCategory(Base):
    """Association row between posts and categories."""
    __tablename__ = "posts_categories"
    __table_args__ = (
        UniqueConstraint(
            "post_id", "category_id", name="posts_categories_post_id_category_id_key",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
