"""Slug Suggestion — server-side version of the editor's title → slug derivation."""

from typing import Literal

from fastapi import APIRouter, Query

from inkwell.core.domain_types import CATEGORY_SLUG_MAX_LENGTH, POST_SLUG_MAX_LENGTH
from inkwell.core.slugs import slugify
from inkwell.schemas.common import SlugSuggestion

router = APIRouter(prefix="/api/v1/slugs", tags=["slugs"])

_MAX_LENGTHS = {
    "post": POST_SLUG_MAX_LENGTH,
    "category": CATEGORY_SLUG_MAX_LENGTH,
}


@router.get("/suggest", response_model=SlugSuggestion)
async def suggest_slug(
    text: str = Query(..., min_length=1, max_length=1000),
    kind: Literal["post", "category"] = Query("post"),
):
    """Suggest a slug for a post title or category name."""
    return SlugSuggestion(slug=slugify(text, max_length=_MAX_LENGTHS[kind]))
