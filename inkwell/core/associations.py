"""Post/category association planning — pure decisions behind join-table writes.

Invariants:
    - Category ids are de-duplicated, first occurrence wins, order preserved
    - None means "leave associations untouched"; [] means "clear all"
    - A non-empty list means replace-all: every existing row is dropped, the new set inserted
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from inkwell.core.domain_types import CategoryId, PostId


def dedupe_category_ids(category_ids: Iterable[int]) -> list[CategoryId]:
    """Drop repeated ids while keeping the caller's order."""
    seen: set[int] = set()
    result: list[CategoryId] = []
    for cid in category_ids:
        if cid in seen:
            continue
        seen.add(cid)
        result.append(CategoryId(cid))
    return result


@dataclass(frozen=True)
class AssociationPlan:
    """What a write must do to the posts_categories rows of one post."""
    clear_existing: bool
    insert_ids: tuple[CategoryId, ...]

    @property
    def is_noop(self) -> bool:
        return not self.clear_existing and not self.insert_ids


def plan_for_create(category_ids: Sequence[int] | None) -> AssociationPlan:
    """A new post has no rows yet, so only inserts are planned."""
    return AssociationPlan(
        clear_existing=False,
        insert_ids=tuple(dedupe_category_ids(category_ids or ())),
    )


def plan_for_update(category_ids: Sequence[int] | None) -> AssociationPlan:
    """Replace-all on update, with None meaning no change."""
    if category_ids is None:
        return AssociationPlan(clear_existing=False, insert_ids=())
    return AssociationPlan(
        clear_existing=True,
        insert_ids=tuple(dedupe_category_ids(category_ids)),
    )


def association_rows(post_id: PostId, plan: AssociationPlan) -> list[dict]:
    """Row values for a bulk insert into posts_categories."""
    return [
        {"post_id": post_id, "category_id": cid} for cid in plan.insert_ids
    ]
