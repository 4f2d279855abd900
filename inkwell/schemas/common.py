"""Shared response shapes."""

from typing import Literal

from pydantic import BaseModel


class DeleteResult(BaseModel):
    """Acknowledgement returned by every delete procedure."""
    success: Literal[True] = True


class SlugSuggestion(BaseModel):
    slug: str
