# farah/recommend/ranking.py
"""
Rank already-fetched vendors for a user.

Pure functions over an in-memory list: no I/O, no shared state. Sorting is
stable, so vendors with equal scores keep their fetch order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Collection, Iterable, Optional, Sequence

from farah.models import UserProfile, VendorCategory, VendorRecord
from farah.recommend.scoring import score_vendor, score_vendor_for_category

DEFAULT_LIMIT = 10
DEFAULT_CATEGORY_LIMIT = 3

Scorer = Callable[[VendorRecord, Optional[UserProfile]], int]


@dataclass(frozen=True)
class ScoredVendor:
    vendor: VendorRecord
    score: int

    @property
    def id(self) -> str:
        return self.vendor.id


def _score_and_sort(
    vendors: Iterable[VendorRecord],
    profile: UserProfile | None,
    scorer: Scorer,
) -> list[ScoredVendor]:
    scored = [ScoredVendor(vendor=v, score=scorer(v, profile)) for v in vendors]
    return sorted(scored, key=lambda s: -s.score)


def rank_vendors(
    vendors: Iterable[VendorRecord],
    profile: UserProfile | None = None,
    category: VendorCategory | str | None = None,
    limit: int = DEFAULT_LIMIT,
    exclude_ids: Collection[str] = (),
) -> list[ScoredVendor]:
    """
    Top-N approved vendors by primary score, optionally within one category.

    Excluded ids are dropped after sorting and before truncation, so the
    result still holds up to `limit` vendors when some are excluded.
    """
    wanted = VendorCategory(category) if category is not None else None
    eligible = [
        v for v in vendors
        if v.is_approved and (wanted is None or v.category == wanted)
    ]

    excluded = set(exclude_ids)
    ranked = [
        s for s in _score_and_sort(eligible, profile, score_vendor)
        if s.id not in excluded
    ]
    return ranked[:max(limit, 0)]


def rank_vendors_by_category(
    vendors: Iterable[VendorRecord],
    profile: UserProfile | None,
    categories: Sequence[VendorCategory | str],
    limit: int = DEFAULT_CATEGORY_LIMIT,
) -> dict[VendorCategory, list[ScoredVendor]]:
    """
    Top-N approved vendors per category, scored with the category policy.

    Every requested category is a key of the result, even with no vendors.
    """
    approved = [v for v in vendors if v.is_approved]

    grouped: dict[VendorCategory, list[ScoredVendor]] = {}
    for raw in categories:
        cat = VendorCategory(raw)
        in_category = [v for v in approved if v.category == cat]
        grouped[cat] = _score_and_sort(in_category, profile, score_vendor_for_category)[:max(limit, 0)]

    return grouped
