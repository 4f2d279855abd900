"""Post Schemas — input limits and response shapes for posts.

Invariants:
    - title, content, slug non-blank; title and slug at most 200 chars
    - slug matches SLUG_PATTERN
    - excerpt at most 500 chars
    - status is DRAFT or PUBLISHED
    - category_ids (alias categoryIds) are positive integers; None and [] are distinct
"""

from datetime import datetime

from pydantic import (
    BaseModel, ConfigDict, Field, PositiveInt, computed_field, field_validator,
)

from inkwell.core.domain_types import (
    POST_EXCERPT_MAX_LENGTH, POST_SLUG_MAX_LENGTH, POST_TITLE_MAX_LENGTH,
    SLUG_PATTERN, PostStatus,
)
from inkwell.schemas.category import CategorySummary


class _PostFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=POST_TITLE_MAX_LENGTH)
    content: str = Field(min_length=1)
    slug: str = Field(
        min_length=1, max_length=POST_SLUG_MAX_LENGTH, pattern=SLUG_PATTERN,
    )
    excerpt: str | None = Field(None, max_length=POST_EXCERPT_MAX_LENGTH)
    category_ids: list[PositiveInt] | None = Field(None, alias="categoryIds")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content cannot be empty or whitespace")
        return v


class PostCreate(_PostFields):
    """Post creation payload. Omitted status means DRAFT."""
    status: PostStatus | None = None


class PostUpdate(_PostFields):
    """Full post update.

    category_ids: omitted → associations untouched, [] → cleared, list → replaced.
    is_published / excerpt: omitted → unchanged.
    """
    is_published: bool | None = None


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    slug: str
    excerpt: str | None = None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def status(self) -> PostStatus:
        return PostStatus.from_flag(self.is_published)


class PostDetailResponse(PostResponse):
    """Post page payload — the post plus its categories."""
    categories: list[CategorySummary] = Field(default_factory=list)
