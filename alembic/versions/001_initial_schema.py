"""Initial schema — posts, categories, posts_categories.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("excerpt", sa.Text, nullable=True),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("slug", name="posts_slug_key"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.UniqueConstraint("slug", name="categories_slug_key"),
    )

    op.create_table(
        "posts_categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "post_id", sa.Integer,
            sa.ForeignKey("posts.id", name="posts_categories_post_id_fkey", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "category_id", sa.Integer,
            sa.ForeignKey("categories.id", name="posts_categories_category_id_fkey", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "post_id", "category_id", name="posts_categories_post_id_category_id_key",
        ),
    )
    op.create_index("ix_posts_categories_post_id", "posts_categories", ["post_id"])
    op.create_index("ix_posts_categories_category_id", "posts_categories", ["category_id"])
    op.create_index("ix_posts_created_at", "posts", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_posts_created_at", table_name="posts")
    op.drop_index("ix_posts_categories_category_id", table_name="posts_categories")
    op.drop_index("ix_posts_categories_post_id", table_name="posts_categories")
    op.drop_table("posts_categories")
    op.drop_table("categories")
    op.drop_table("posts")
