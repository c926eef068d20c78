# farah/recommend/scoring.py
"""
Deterministic vendor recommendation scoring.

Pure utility — no DB access, no side effects.

Two weighting policies exist and are kept apart on purpose: the flat
"recommended vendors" list and the per-category dashboard block were tuned
separately and callers depend on the different weightings.

Primary policy (score_vendor):
  +100  is_featured OR subscription_plan == 'featured'
  +40   subscription_plan == 'pro'
  +10   vendor region has neighbours in ADJACENT_REGIONS (profile required)
  +25   user budget tier == vendor price tier
  +15   vendor price tier is one step below user tier (mid→budget, luxury→mid)
  +0…20 min(shortlist_count * 2, 20)
  +10   portfolio_images non-empty
  +5    description longer than 50 characters

Category policy (score_vendor_for_category):
  +50   is_featured
  +20   subscription_plan == 'pro'
  +25   user budget tier == vendor price tier
  popularity / portfolio / description as above
"""
from __future__ import annotations

from typing import Mapping

from farah.models import (
    BudgetTier,
    LebaneseRegion,
    SubscriptionPlan,
    UserProfile,
    VendorRecord,
)


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

# Hand-authored and not symmetric; reproduce as-is.
ADJACENT_REGIONS: Mapping[LebaneseRegion, tuple[LebaneseRegion, ...]] = {
    LebaneseRegion.BEIRUT: (LebaneseRegion.MOUNT_LEBANON,),
    LebaneseRegion.MOUNT_LEBANON: (
        LebaneseRegion.BEIRUT,
        LebaneseRegion.NORTH,
        LebaneseRegion.BEKAA,
    ),
    LebaneseRegion.NORTH: (LebaneseRegion.MOUNT_LEBANON, LebaneseRegion.BEKAA),
    LebaneseRegion.SOUTH: (LebaneseRegion.MOUNT_LEBANON, LebaneseRegion.NABATIEH),
    LebaneseRegion.BEKAA: (
        LebaneseRegion.MOUNT_LEBANON,
        LebaneseRegion.NORTH,
        LebaneseRegion.NABATIEH,
    ),
    LebaneseRegion.NABATIEH: (LebaneseRegion.SOUTH, LebaneseRegion.BEKAA),
}

# (user tier, vendor tier) pairs that earn the partial-match bonus.
PARTIAL_TIER_MATCHES: frozenset[tuple[BudgetTier, BudgetTier]] = frozenset({
    (BudgetTier.MID, BudgetTier.BUDGET),
    (BudgetTier.LUXURY, BudgetTier.MID),
})

FEATURED_POINTS = 100
PRO_POINTS = 40
REGION_POINTS = 10
TIER_MATCH_POINTS = 25
TIER_PARTIAL_POINTS = 15

CATEGORY_FEATURED_POINTS = 50
CATEGORY_PRO_POINTS = 20

POPULARITY_PER_SHORTLIST = 2
POPULARITY_CAP = 20
PORTFOLIO_POINTS = 10
DESCRIPTION_POINTS = 5
DESCRIPTION_MIN_LENGTH = 50


# ---------------------------------------------------------------------------
# Budget tiers
# ---------------------------------------------------------------------------

def user_budget_tier(budget_usd: float | None) -> BudgetTier | None:
    """Total wedding budget → tier. Missing or zero budget has no tier."""
    if not budget_usd:
        return None
    if budget_usd < 15000:
        return BudgetTier.BUDGET
    if budget_usd < 50000:
        return BudgetTier.MID
    return BudgetTier.LUXURY


def vendor_price_tier(price_usd: float | None) -> BudgetTier | None:
    """Vendor starting price → tier. Missing or zero price has no tier."""
    if not price_usd:
        return None
    if price_usd < 1000:
        return BudgetTier.BUDGET
    if price_usd < 5000:
        return BudgetTier.MID
    return BudgetTier.LUXURY


# ---------------------------------------------------------------------------
# Shared terms
# ---------------------------------------------------------------------------

def _tiers(
    vendor: VendorRecord, profile: UserProfile | None
) -> tuple[BudgetTier | None, BudgetTier | None]:
    budget = profile.estimated_budget_usd if profile is not None else None
    return user_budget_tier(budget), vendor_price_tier(vendor.starting_price_usd)


def _quality_terms(vendor: VendorRecord) -> dict[str, int]:
    description = vendor.description or ""
    return {
        "popularity": min(vendor.shortlist_count * POPULARITY_PER_SHORTLIST, POPULARITY_CAP),
        "portfolio": PORTFOLIO_POINTS if vendor.portfolio_images else 0,
        "description": DESCRIPTION_POINTS if len(description) > DESCRIPTION_MIN_LENGTH else 0,
    }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def score_breakdown(vendor: VendorRecord, profile: UserProfile | None) -> dict[str, int]:
    """Per-term contributions of the primary policy. Sums to score_vendor()."""
    plan = vendor.subscription_plan

    featured = vendor.is_featured or plan == SubscriptionPlan.FEATURED

    region = 0
    if vendor.region is not None and profile is not None:
        if ADJACENT_REGIONS.get(vendor.region):
            region = REGION_POINTS

    tier = 0
    user_tier, vendor_tier = _tiers(vendor, profile)
    if user_tier and vendor_tier:
        if user_tier == vendor_tier:
            tier = TIER_MATCH_POINTS
        elif (user_tier, vendor_tier) in PARTIAL_TIER_MATCHES:
            tier = TIER_PARTIAL_POINTS

    return {
        "featured": FEATURED_POINTS if featured else 0,
        "pro": PRO_POINTS if plan == SubscriptionPlan.PRO else 0,
        "region": region,
        "budget_tier": tier,
        **_quality_terms(vendor),
    }


def category_score_breakdown(
    vendor: VendorRecord, profile: UserProfile | None
) -> dict[str, int]:
    """Per-term contributions of the category policy. Sums to score_vendor_for_category()."""
    user_tier, vendor_tier = _tiers(vendor, profile)
    tier_match = bool(user_tier and vendor_tier and user_tier == vendor_tier)

    return {
        "featured": CATEGORY_FEATURED_POINTS if vendor.is_featured else 0,
        "pro": CATEGORY_PRO_POINTS if vendor.subscription_plan == SubscriptionPlan.PRO else 0,
        "region": 0,
        "budget_tier": TIER_MATCH_POINTS if tier_match else 0,
        **_quality_terms(vendor),
    }


def score_vendor(vendor: VendorRecord, profile: UserProfile | None = None) -> int:
    """
    Primary recommendation score (>= 0).

    Same inputs always produce the same output. Without a profile the region
    and budget-tier terms are 0.
    """
    return sum(score_breakdown(vendor, profile).values())


def score_vendor_for_category(
    vendor: VendorRecord, profile: UserProfile | None = None
) -> int:
    """Score used by the per-category ranking (lighter featured/pro weights)."""
    return sum(category_score_breakdown(vendor, profile).values())
