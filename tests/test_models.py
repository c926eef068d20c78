from __future__ import annotations

import pytest
from pydantic import ValidationError

from farah.models import (
    KEY_CATEGORIES,
    LebaneseRegion,
    SubscriptionPlan,
    VendorCategory,
    VendorRecord,
    VendorStatus,
)


def test_only_id_required():
    v = VendorRecord(id="v-1")
    assert v.category is None
    assert v.region is None
    assert v.portfolio_images == []
    assert v.shortlist_count == 0
    assert v.is_featured is False
    assert v.subscription_plan is None
    assert not v.is_approved


def test_missing_id_rejected():
    with pytest.raises(ValidationError):
        VendorRecord.model_validate({"category": "venue"})


def test_numeric_id_coerced_to_text():
    assert VendorRecord.model_validate({"id": 42}).id == "42"


def test_region_normalised_to_lowercase():
    v = VendorRecord.model_validate({"id": "v", "region": " Mount_Lebanon "})
    assert v.region == LebaneseRegion.MOUNT_LEBANON


def test_blank_region_is_none():
    assert VendorRecord.model_validate({"id": "v", "region": ""}).region is None


def test_unknown_region_rejected():
    with pytest.raises(ValidationError):
        VendorRecord.model_validate({"id": "v", "region": "cyprus"})


def test_unknown_category_rejected():
    with pytest.raises(ValidationError):
        VendorRecord.model_validate({"id": "v", "category": "astrologer"})


@pytest.mark.parametrize("raw,plan", [
    ("pro", SubscriptionPlan.PRO),
    ("PRO", None),
    ("Featured", None),
    (" pro", None),
    ("featured", SubscriptionPlan.FEATURED),
    ("none", SubscriptionPlan.NONE),
    ("enterprise", None),
    ("", None),
    (None, None),
])
def test_subscription_plan_parsing(raw, plan):
    assert VendorRecord.model_validate({"id": "v", "subscription_plan": raw}).subscription_plan == plan


def test_negative_values_rejected():
    with pytest.raises(ValidationError):
        VendorRecord.model_validate({"id": "v", "shortlist_count": -1})
    with pytest.raises(ValidationError):
        VendorRecord.model_validate({"id": "v", "starting_price_usd": -10})


def test_extra_columns_ignored():
    v = VendorRecord.model_validate({"id": "v", "instagram": "@x", "status": "approved"})
    assert v.status == VendorStatus.APPROVED
    assert v.is_approved


def test_records_are_immutable():
    v = VendorRecord(id="v")
    with pytest.raises(ValidationError):
        v.shortlist_count = 3


def test_every_enum_member_has_label():
    assert all(c.label for c in VendorCategory)
    assert all(r.label for r in LebaneseRegion)
    assert VendorCategory.ZAFFE.label == "Zaffé"
    assert LebaneseRegion.NORTH.label == "North Lebanon"


def test_key_categories():
    assert [c.value for c in KEY_CATEGORIES] == ["venue", "photographer", "dj", "flowers"]
