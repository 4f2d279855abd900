"""Association planning — create inserts, update replaces, None leaves alone."""

from inkwell.core.associations import (
    association_rows, dedupe_category_ids, plan_for_create, plan_for_update,
)
from inkwell.core.domain_types import PostId


def test_dedupe_keeps_first_occurrence_order():
    assert dedupe_category_ids([3, 1, 3, 2, 1]) == [3, 1, 2]


def test_create_without_categories_is_noop():
    assert plan_for_create(None).is_noop
    assert plan_for_create([]).is_noop


def test_create_plans_inserts_only():
    plan = plan_for_create([2, 2, 5])
    assert plan.clear_existing is False
    assert plan.insert_ids == (2, 5)


def test_update_with_none_leaves_associations_untouched():
    plan = plan_for_update(None)
    assert plan.is_noop


def test_update_with_empty_list_clears_everything():
    plan = plan_for_update([])
    assert plan.clear_existing is True
    assert plan.insert_ids == ()
    assert not plan.is_noop


def test_update_with_ids_replaces_all():
    plan = plan_for_update([3])
    assert plan.clear_existing is True
    assert plan.insert_ids == (3,)


def test_association_rows_one_per_category():
    rows = association_rows(PostId(7), plan_for_create([1, 2]))
    assert rows == [
        {"post_id": 7, "category_id": 1},
        {"post_id": 7, "category_id": 2},
    ]
