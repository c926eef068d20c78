# farah/db/vendors.py
"""
Read-only access to `vendors` and `profiles`.

Each call issues exactly one query. Reads are idempotent, so callers may
retry freely; nothing here writes.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError
from supabase import Client

from farah.errors import ProfileFetchError, VendorFetchError
from farah.models import UserProfile, VendorCategory, VendorRecord, VendorStatus

logger = logging.getLogger(__name__)

VENDOR_COLUMNS = (
    "id,business_name,category,region,status,starting_price_usd,"
    "portfolio_images,shortlist_count,description,is_featured,subscription_plan"
)
PROFILE_COLUMNS = "user_id,full_name,estimated_budget_usd"


def _rows_to_vendors(data: Iterable[dict[str, Any]]) -> List[VendorRecord]:
    vendors: List[VendorRecord] = []
    for row in data:
        try:
            vendors.append(VendorRecord.model_validate(row))
        except ValidationError as e:
            # Never fail a whole ranking because of one malformed row
            logger.warning(
                "[vendors] skipping malformed row id=%s errors=%d",
                row.get("id", "?") if isinstance(row, dict) else "?", e.error_count(),
            )
    return vendors


def fetch_approved_vendors(
    supabase: Client,
    *,
    category: VendorCategory | str | None = None,
    categories: Iterable[VendorCategory | str] | None = None,
) -> List[VendorRecord]:
    """
    Fetch approved vendors, optionally limited to one category or a set.

    Raises VendorFetchError when the query itself fails; an empty table is
    an empty list, not an error.
    """
    query = (
        supabase.table("vendors")
        .select(VENDOR_COLUMNS)
        .eq("status", VendorStatus.APPROVED.value)
    )
    if category is not None:
        query = query.eq("category", VendorCategory(category).value)
    if categories is not None:
        query = query.in_("category", [VendorCategory(c).value for c in categories])

    try:
        resp = query.execute()
    except Exception as e:
        logger.error("[vendors] fetch failed: %s: %s", type(e).__name__, e)
        raise VendorFetchError("Failed to fetch vendors") from e

    data: Any = getattr(resp, "data", None)
    return _rows_to_vendors(data or [])


def fetch_user_profile(supabase: Client, user_id: str) -> Optional[UserProfile]:
    """At most one profile per signed-in user; None when the user has none."""
    try:
        resp = (
            supabase.table("profiles")
            .select(PROFILE_COLUMNS)
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        logger.error("[profiles] fetch failed user_id=%s: %s: %s", user_id, type(e).__name__, e)
        raise ProfileFetchError(f"Failed to fetch profile for user {user_id}") from e

    rows: Any = getattr(resp, "data", None)
    if not rows:
        return None

    try:
        return UserProfile.model_validate(rows[0])
    except ValidationError as e:
        raise ProfileFetchError(f"Malformed profile row for user {user_id}") from e
