from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VendorCategory(str, Enum):
    VENUE = "venue"
    PHOTOGRAPHER = "photographer"
    VIDEOGRAPHER = "videographer"
    DJ = "dj"
    SOUND_LIGHTING = "sound_lighting"
    ZAFFE = "zaffe"
    BRIDAL_DRESS = "bridal_dress"
    MAKEUP_ARTIST = "makeup_artist"
    FLOWERS = "flowers"
    CAR_RENTAL = "car_rental"
    CATERING = "catering"
    WEDDING_PLANNER = "wedding_planner"
    JEWELRY = "jewelry"
    INVITATIONS = "invitations"
    CAKE = "cake"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


class LebaneseRegion(str, Enum):
    BEIRUT = "beirut"
    MOUNT_LEBANON = "mount_lebanon"
    NORTH = "north"
    SOUTH = "south"
    BEKAA = "bekaa"
    NABATIEH = "nabatieh"

    @property
    def label(self) -> str:
        return REGION_LABELS[self]


class VendorStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SubscriptionPlan(str, Enum):
    NONE = "none"
    PRO = "pro"
    FEATURED = "featured"


class BudgetTier(str, Enum):
    BUDGET = "budget"
    MID = "mid"
    LUXURY = "luxury"


CATEGORY_LABELS: dict[VendorCategory, str] = {
    VendorCategory.VENUE: "Venues",
    VendorCategory.PHOTOGRAPHER: "Photographers",
    VendorCategory.VIDEOGRAPHER: "Videographers",
    VendorCategory.DJ: "DJs",
    VendorCategory.SOUND_LIGHTING: "Sound & Lighting",
    VendorCategory.ZAFFE: "Zaffé",
    VendorCategory.BRIDAL_DRESS: "Bridal Dresses",
    VendorCategory.MAKEUP_ARTIST: "Makeup Artists",
    VendorCategory.FLOWERS: "Flower Designers",
    VendorCategory.CAR_RENTAL: "Car Rentals",
    VendorCategory.CATERING: "Catering",
    VendorCategory.WEDDING_PLANNER: "Wedding Planners",
    VendorCategory.JEWELRY: "Jewelry",
    VendorCategory.INVITATIONS: "Invitations",
    VendorCategory.CAKE: "Cake & Sweets",
    VendorCategory.ENTERTAINMENT: "Entertainment",
    VendorCategory.OTHER: "Other",
}

REGION_LABELS: dict[LebaneseRegion, str] = {
    LebaneseRegion.BEIRUT: "Beirut",
    LebaneseRegion.MOUNT_LEBANON: "Mount Lebanon",
    LebaneseRegion.NORTH: "North Lebanon",
    LebaneseRegion.SOUTH: "South Lebanon",
    LebaneseRegion.BEKAA: "Bekaa",
    LebaneseRegion.NABATIEH: "Nabatieh",
}

# Dashboard "recommended for you" block.
KEY_CATEGORIES: tuple[VendorCategory, ...] = (
    VendorCategory.VENUE,
    VendorCategory.PHOTOGRAPHER,
    VendorCategory.DJ,
    VendorCategory.FLOWERS,
)


class VendorRecord(BaseModel):
    """
    One row of the `vendors` table, as far as recommendations care.

    Only `id` is required. Every other field is optional and contributes
    nothing to a score when absent.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    business_name: Optional[str] = None
    category: Optional[VendorCategory] = None
    region: Optional[LebaneseRegion] = None
    status: Optional[VendorStatus] = None

    starting_price_usd: Optional[float] = Field(default=None, ge=0)
    portfolio_images: List[str] = Field(default_factory=list)
    shortlist_count: int = Field(default=0, ge=0)
    description: Optional[str] = None

    is_featured: bool = False
    subscription_plan: Optional[SubscriptionPlan] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, v):
        return str(v) if v is not None else v

    @field_validator("region", mode="before")
    @classmethod
    def _region_lowercase(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @field_validator("portfolio_images", mode="before")
    @classmethod
    def _null_images(cls, v):
        return [] if v is None else v

    @field_validator("shortlist_count", mode="before")
    @classmethod
    def _null_count(cls, v):
        return 0 if v is None else v

    @field_validator("is_featured", mode="before")
    @classmethod
    def _null_featured(cls, v):
        return False if v is None else v

    @field_validator("subscription_plan", mode="before")
    @classmethod
    def _unknown_plan(cls, v):
        # Plans outside the known set are stored as free text; they earn nothing.
        # Matching is exact: "Featured" is not "featured".
        if v is None or isinstance(v, SubscriptionPlan):
            return v
        try:
            return SubscriptionPlan(v)
        except ValueError:
            return None

    @property
    def is_approved(self) -> bool:
        return self.status == VendorStatus.APPROVED


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    user_id: Optional[str] = None
    full_name: Optional[str] = None
    estimated_budget_usd: Optional[float] = Field(default=None, ge=0)
