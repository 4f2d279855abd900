"""Category Schemas — input limits and response shapes for categories.

Invariants:
    - name: 1-50 chars on input, stripped, non-blank
    - slug: lowercase alphanumerics joined by single hyphens, at most 255 chars
    - CategoryUpdate never carries an explicit null for name or slug
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from inkwell.core.domain_types import (
    CATEGORY_NAME_INPUT_MAX_LENGTH, CATEGORY_SLUG_MAX_LENGTH, SLUG_PATTERN,
)


def _strip_name(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class CategoryCreate(BaseModel):
    """Category creation payload."""
    name: str = Field(min_length=1, max_length=CATEGORY_NAME_INPUT_MAX_LENGTH)
    slug: str = Field(
        min_length=1, max_length=CATEGORY_SLUG_MAX_LENGTH, pattern=SLUG_PATTERN,
    )
    description: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class CategoryUpdate(BaseModel):
    """Partial category update — only fields present in the payload change."""
    name: str | None = Field(
        None, min_length=1, max_length=CATEGORY_NAME_INPUT_MAX_LENGTH,
    )
    slug: str | None = Field(
        None, min_length=1, max_length=CATEGORY_SLUG_MAX_LENGTH, pattern=SLUG_PATTERN,
    )
    description: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return _strip_name(v)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in ("name", "slug"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    slug: str


class CategorySummary(BaseModel):
    """Category as embedded in a post page."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
