"""Domain Types — identity types and enums shared by services, schemas and routes.

Invariants:
    - PostId, CategoryId wrap database integer keys
    - Post publication status is one of exactly two values (PostStatus)
    - SLUG_PATTERN is the single definition of a valid slug

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)
CategoryId = NewType("CategoryId", int)


# ─── Value Constraints ───────────────────────────────────────────

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
SLUG_RE = re.compile(SLUG_PATTERN)

POST_SLUG_MAX_LENGTH = 200
POST_TITLE_MAX_LENGTH = 200
POST_EXCERPT_MAX_LENGTH = 500
CATEGORY_SLUG_MAX_LENGTH = 255
CATEGORY_NAME_MAX_LENGTH = 100       # storage column
CATEGORY_NAME_INPUT_MAX_LENGTH = 50  # accepted at the API boundary


# ─── Enums ───────────────────────────────────────────────────────

class PostStatus(str, Enum):
    """Publication state as exposed to clients — maps to posts.is_published."""
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"

    @property
    def is_published(self) -> bool:
        return self is PostStatus.PUBLISHED

    @classmethod
    def from_flag(cls, is_published: bool) -> "PostStatus":
        return cls.PUBLISHED if is_published else cls.DRAFT
