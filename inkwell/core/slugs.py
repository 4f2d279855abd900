"""Slug derivation — turns a human-readable title or name into a URL-safe slug.

Invariants:
    - Output always matches SLUG_PATTERN (lowercase alphanumerics joined by single hyphens)
    - Non-ASCII letters are transliterated, never dropped silently
    - Output never exceeds max_length and never ends with a hyphen
    - Input with no usable characters yields "untitled"
"""

import re

from unidecode import unidecode

FALLBACK_SLUG = "untitled"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str, max_length: int | None = None) -> str:
    """Derive a slug: transliterate, lowercase, collapse non-alphanumerics to '-'."""
    normalized = unidecode(text or "").lower()
    slug = _NON_ALNUM.sub("-", normalized).strip("-")
    if max_length is not None and len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")
    return slug or FALLBACK_SLUG
