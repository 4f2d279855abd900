"""Post schemas — boundary validation before anything reaches storage.

Invariants:
    - title/content/slug must be non-blank; slug must match the lowercase-hyphen pattern
    - excerpt at most 500 chars; status only DRAFT or PUBLISHED
    - categoryIds alias accepted; omitted and [] stay distinguishable
"""

import pytest
from pydantic import ValidationError

from inkwell.core.domain_types import PostStatus
from inkwell.schemas.post import PostCreate, PostResponse, PostUpdate


def _payload(**overrides):
    data = {"title": "First post", "content": "# Hello", "slug": "first-post"}
    data.update(overrides)
    return data


def test_minimal_create_is_a_draft_without_categories():
    body = PostCreate(**_payload())
    assert body.status is None
    assert body.category_ids is None


def test_category_ids_accepts_camel_case_alias():
    body = PostCreate.model_validate(_payload(categoryIds=[1, 2]))
    assert body.category_ids == [1, 2]


def test_category_ids_accepts_field_name():
    body = PostCreate(**_payload(category_ids=[3]))
    assert body.category_ids == [3]


def test_title_is_stripped():
    assert PostCreate(**_payload(title="  Spaced  ")).title == "Spaced"


@pytest.mark.parametrize("field", ["title", "content", "slug"])
def test_required_fields_reject_empty(field):
    with pytest.raises(ValidationError):
        PostCreate(**_payload(**{field: ""}))


@pytest.mark.parametrize("field", ["title", "content"])
def test_required_fields_reject_whitespace(field):
    with pytest.raises(ValidationError):
        PostCreate(**_payload(**{field: "   "}))


@pytest.mark.parametrize("slug", ["First-Post", "first post", "first--post", "-first", "first_post"])
def test_slug_pattern(slug):
    with pytest.raises(ValidationError):
        PostCreate(**_payload(slug=slug))


def test_slug_max_length():
    PostCreate(**_payload(slug="a" * 200))
    with pytest.raises(ValidationError):
        PostCreate(**_payload(slug="a" * 201))


def test_excerpt_max_length():
    PostCreate(**_payload(excerpt="x" * 500))
    with pytest.raises(ValidationError):
        PostCreate(**_payload(excerpt="x" * 501))


def test_status_enumeration():
    assert PostCreate(**_payload(status="PUBLISHED")).status is PostStatus.PUBLISHED
    with pytest.raises(ValidationError):
        PostCreate(**_payload(status="ARCHIVED"))


def test_category_ids_must_be_positive():
    with pytest.raises(ValidationError):
        PostCreate(**_payload(categoryIds=[0]))


def test_update_distinguishes_omitted_from_empty_category_ids():
    omitted = PostUpdate(**_payload())
    emptied = PostUpdate.model_validate(_payload(categoryIds=[]))
    assert omitted.category_ids is None
    assert emptied.category_ids == []


def test_update_tracks_whether_excerpt_was_sent():
    assert PostUpdate(**_payload()).model_dump(include={"excerpt"}, exclude_unset=True) == {}
    sent = PostUpdate(**_payload(excerpt=None))
    assert sent.model_dump(include={"excerpt"}, exclude_unset=True) == {"excerpt": None}


def test_response_derives_status_from_flag():
    from datetime import datetime, timezone

    now = datetime.now(timezone.utc)
    resp = PostResponse(
        id=1, title="t", content="c", slug="s", is_published=True,
        created_at=now, updated_at=now,
    )
    assert resp.model_dump()["status"] == PostStatus.PUBLISHED
