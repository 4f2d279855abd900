"""Service test fixtures — seeded categories on the per-test SQLite database."""

import pytest

from inkwell.services.category_service import CategoryService
from inkwell.services.post_service import PostService


@pytest.fixture
def post_service(test_db):
    return PostService(test_db)


@pytest.fixture
def category_service(test_db):
    return CategoryService(test_db)


@pytest.fixture
async def categories(category_service):
    """Three categories: ids in creation order, names deliberately not alphabetical."""
    return [
        await category_service.create(name="Python", slug="python"),
        await category_service.create(name="Databases", slug="databases"),
        await category_service.create(name="Web", slug="web", description="HTTP things"),
    ]
