# farah/recommend/feeds.py
"""
Fetch-then-rank recommendation feeds for one session.

Each refresh() issues one vendor query and ranks the result locally. A
failed query sets `error` and keeps the last successful ranking in place;
it is never reported as "no vendors".
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Optional, Sequence

from supabase import Client

from farah.db.vendors import fetch_approved_vendors
from farah.errors import FetchError
from farah.models import KEY_CATEGORIES, VendorCategory
from farah.recommend.ranking import (
    DEFAULT_CATEGORY_LIMIT,
    DEFAULT_LIMIT,
    ScoredVendor,
    rank_vendors,
    rank_vendors_by_category,
)
from farah.session import SessionContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecommendationState:
    vendors: tuple[ScoredVendor, ...] = ()
    error: Optional[FetchError] = None


@dataclass(frozen=True)
class CategoryRecommendationState:
    vendors_by_category: dict[VendorCategory, tuple[ScoredVendor, ...]] = field(default_factory=dict)
    error: Optional[FetchError] = None

    @property
    def has_vendors(self) -> bool:
        return any(self.vendors_by_category.values())


class VendorRecommendations:
    """Flat top-N list, optionally within one category."""

    def __init__(
        self,
        supabase: Client,
        session: SessionContext,
        *,
        category: VendorCategory | str | None = None,
        limit: int = DEFAULT_LIMIT,
        exclude_ids: Collection[str] = (),
    ) -> None:
        self.supabase = supabase
        self.session = session
        self.category = VendorCategory(category) if category is not None else None
        self.limit = limit
        self.exclude_ids = frozenset(exclude_ids)
        self.state = RecommendationState()

    def refresh(self) -> RecommendationState:
        try:
            vendors = fetch_approved_vendors(self.supabase, category=self.category)
        except FetchError as e:
            logger.error("[recommend] keeping previous ranking after fetch error: %s", e)
            self.state = RecommendationState(vendors=self.state.vendors, error=e)
            return self.state

        ranked = rank_vendors(
            vendors,
            self.session.profile,
            category=self.category,
            limit=self.limit,
            exclude_ids=self.exclude_ids,
        )
        logger.info(
            "[recommend] fetched=%d returned=%d category=%s",
            len(vendors), len(ranked), self.category.value if self.category else None,
        )
        self.state = RecommendationState(vendors=tuple(ranked))
        return self.state


class CategoryRecommendations:
    """Top-N per category, e.g. the dashboard's key categories."""

    def __init__(
        self,
        supabase: Client,
        session: SessionContext,
        categories: Sequence[VendorCategory | str] = KEY_CATEGORIES,
        *,
        limit: int = DEFAULT_CATEGORY_LIMIT,
    ) -> None:
        self.supabase = supabase
        self.session = session
        self.categories = tuple(VendorCategory(c) for c in categories)
        self.limit = limit
        self.state = CategoryRecommendationState()

    def refresh(self) -> CategoryRecommendationState:
        try:
            vendors = fetch_approved_vendors(self.supabase, categories=self.categories)
        except FetchError as e:
            logger.error("[recommend] keeping previous category ranking after fetch error: %s", e)
            self.state = CategoryRecommendationState(
                vendors_by_category=self.state.vendors_by_category, error=e,
            )
            return self.state

        grouped = rank_vendors_by_category(
            vendors, self.session.profile, self.categories, limit=self.limit,
        )
        logger.info(
            "[recommend] fetched=%d categories=%s",
            len(vendors), ",".join(c.value for c in self.categories),
        )
        self.state = CategoryRecommendationState(
            vendors_by_category={cat: tuple(items) for cat, items in grouped.items()},
        )
        return self.state
