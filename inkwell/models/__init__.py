"""ORM Models — SQLAlchemy declarative models for posts, categories and their join table.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from inkwell.models.post import Post  # noqa: F401
from inkwell.models.category import Category  # noqa: F401
from inkwell.models.post_category import PostCategory  # noqa: F401
