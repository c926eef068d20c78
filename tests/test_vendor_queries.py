"""
Vendor / profile query contract tests.

Verifies:
  1. fetch_approved_vendors always filters on status = approved
  2. Optional category (eq) and category set (in_) filters
  3. Row parsing: nulls tolerated, malformed rows skipped, not fatal
  4. Query failures surface as VendorFetchError (not an empty list)
  5. fetch_user_profile returns None for no row, ProfileFetchError on failure
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from farah.db.vendors import fetch_approved_vendors, fetch_user_profile
from farah.errors import FetchError, ProfileFetchError, VendorFetchError
from farah.models import LebaneseRegion, VendorCategory


def _mock_supabase(rows: list[dict] | None = None) -> tuple[MagicMock, MagicMock]:
    """Returns (supabase_mock, builder_mock) with chained methods."""
    sb = MagicMock()
    builder = MagicMock()
    for method in ["select", "in_", "order", "limit", "eq", "neq"]:
        getattr(builder, method).return_value = builder
    result = MagicMock()
    result.data = rows if rows is not None else []
    builder.execute.return_value = result
    sb.table.return_value = builder
    return sb, builder


VENDOR_ROW = {
    "id": "7d1e6c8a-0000-4000-8000-000000000001",
    "business_name": "Beirut Seaview Ballroom",
    "category": "venue",
    "region": "beirut",
    "status": "approved",
    "starting_price_usd": 8000,
    "portfolio_images": ["https://cdn.example/1.jpg"],
    "shortlist_count": 4,
    "description": "Elegant waterfront ballroom with panoramic sea views in the heart of Beirut.",
    "is_featured": True,
    "subscription_plan": None,
}


class TestFetchApprovedVendors:

    def test_reads_vendors_table_filtered_to_approved(self):
        sb, builder = _mock_supabase([VENDOR_ROW])
        fetch_approved_vendors(sb)
        sb.table.assert_called_once_with("vendors")
        builder.eq.assert_any_call("status", "approved")
        builder.in_.assert_not_called()

    def test_single_category_filter(self):
        sb, builder = _mock_supabase()
        fetch_approved_vendors(sb, category=VendorCategory.DJ)
        builder.eq.assert_any_call("category", "dj")

    def test_category_set_filter(self):
        sb, builder = _mock_supabase()
        fetch_approved_vendors(sb, categories=["venue", VendorCategory.FLOWERS])
        builder.in_.assert_called_once_with("category", ["venue", "flowers"])

    def test_one_query_per_call(self):
        sb, builder = _mock_supabase([VENDOR_ROW])
        fetch_approved_vendors(sb, categories=["venue"])
        assert builder.execute.call_count == 1

    def test_rows_parsed_into_records(self):
        sb, _ = _mock_supabase([VENDOR_ROW])
        [v] = fetch_approved_vendors(sb)
        assert v.id == VENDOR_ROW["id"]
        assert v.category == VendorCategory.VENUE
        assert v.region == LebaneseRegion.BEIRUT
        assert v.is_approved
        assert v.starting_price_usd == 8000

    def test_nullable_columns_default_to_zero_contribution(self):
        row = dict(VENDOR_ROW, portfolio_images=None, is_featured=None, shortlist_count=None)
        sb, _ = _mock_supabase([row])
        [v] = fetch_approved_vendors(sb)
        assert v.portfolio_images == []
        assert v.is_featured is False
        assert v.shortlist_count == 0

    def test_malformed_row_skipped(self, caplog):
        bad = dict(VENDOR_ROW, id="bad-1", region="atlantis")
        sb, _ = _mock_supabase([bad, VENDOR_ROW])
        with caplog.at_level("WARNING"):
            vendors = fetch_approved_vendors(sb)
        assert [v.id for v in vendors] == [VENDOR_ROW["id"]]
        assert "bad-1" in caplog.text

    def test_non_mapping_row_skipped(self, caplog):
        sb, _ = _mock_supabase([None, VENDOR_ROW])
        with caplog.at_level("WARNING"):
            vendors = fetch_approved_vendors(sb)
        assert [v.id for v in vendors] == [VENDOR_ROW["id"]]
        assert "id=?" in caplog.text

    def test_empty_result_is_empty_list(self):
        sb, builder = _mock_supabase()
        builder.execute.return_value.data = None
        assert fetch_approved_vendors(sb) == []

    def test_query_failure_raises_vendor_fetch_error(self):
        sb, builder = _mock_supabase()
        builder.execute.side_effect = ConnectionError("network down")
        with pytest.raises(VendorFetchError) as exc:
            fetch_approved_vendors(sb)
        assert isinstance(exc.value, FetchError)
        assert isinstance(exc.value.__cause__, ConnectionError)

    def test_unknown_category_rejected_before_query(self):
        sb, builder = _mock_supabase()
        with pytest.raises(ValueError):
            fetch_approved_vendors(sb, category="astrologer")
        builder.execute.assert_not_called()


class TestFetchUserProfile:

    def test_reads_profile_by_user_id(self):
        sb, builder = _mock_supabase([{"user_id": "u-1", "estimated_budget_usd": 20000}])
        p = fetch_user_profile(sb, "u-1")
        sb.table.assert_called_once_with("profiles")
        builder.eq.assert_called_once_with("user_id", "u-1")
        builder.limit.assert_called_once_with(1)
        assert p is not None
        assert p.estimated_budget_usd == 20000

    def test_missing_profile_is_none(self):
        sb, _ = _mock_supabase([])
        assert fetch_user_profile(sb, "u-1") is None

    def test_null_budget_allowed(self):
        sb, _ = _mock_supabase([{"user_id": "u-1", "estimated_budget_usd": None}])
        p = fetch_user_profile(sb, "u-1")
        assert p is not None
        assert p.estimated_budget_usd is None

    def test_query_failure_raises_profile_fetch_error(self):
        sb, builder = _mock_supabase()
        builder.execute.side_effect = RuntimeError("boom")
        with pytest.raises(ProfileFetchError):
            fetch_user_profile(sb, "u-1")

    def test_malformed_profile_raises(self):
        sb, _ = _mock_supabase([{"user_id": "u-1", "estimated_budget_usd": -5}])
        with pytest.raises(ProfileFetchError):
            fetch_user_profile(sb, "u-1")
