# -*- coding: utf-8 -*-
"""
Listing record model.

The record is the single aggregate a wizard session edits. It is created
once with defaults and mutated in place; sections are plain dataclasses.
"""

from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from models.media import EncodedImage


class PriceType(Enum):
    """How the item ships relative to the order."""
    FIXED = "fixed"      # Ready to ship
    STAGED = "staged"    # Pre-order, customized or delayed shipping


class ListingStatus(Enum):
    """Publication status after submit."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class MediaSlotName(Enum):
    """The two independent image collections of a listing."""
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass
class GeneralInfo:
    """Step 0: title and categorical attributes."""
    title: str = ""
    category: Optional[str] = None
    brand: Optional[str] = None
    audience: Optional[str] = None
    material: Optional[str] = None
    style: Optional[str] = None
    feature: Optional[str] = None
    craft: Optional[str] = None
    packaging: Optional[str] = None


@dataclass
class MediaInfo:
    """Step 1: ordered image collections."""
    primary: List[EncodedImage] = field(default_factory=list)
    secondary: List[EncodedImage] = field(default_factory=list)


@dataclass
class PricingInfo:
    """Step 2: price and stock."""
    price_type: PriceType = PriceType.FIXED
    sale_price: Decimal = Decimal("0")
    original_price: Decimal = Decimal("0")  # Only shown when has_discount
    has_discount: bool = False
    stock_quantity: int = 0


@dataclass
class FulfillmentInfo:
    """Step 3: shipping and after-sales terms."""
    shipping_method: Optional[str] = None
    free_shipping: bool = False
    after_sales_enabled: bool = False
    returns_allowed: bool = True
    returns_window_days: int = 7
    after_sales_options: List[str] = field(default_factory=list)


@dataclass
class ListingDetails:
    """Step 4: free text metadata."""
    description: str = ""
    tags: List[str] = field(default_factory=list)


@dataclass
class ListingRecord:
    """
    The catalog item being created by one wizard session.
    """

    general: GeneralInfo = field(default_factory=GeneralInfo)
    media: MediaInfo = field(default_factory=MediaInfo)
    pricing: PricingInfo = field(default_factory=PricingInfo)
    fulfillment: FulfillmentInfo = field(default_factory=FulfillmentInfo)
    details: ListingDetails = field(default_factory=ListingDetails)
    status: ListingStatus = ListingStatus.ACTIVE

    # Sections editable through field updates; "status" is a bare field
    EDITABLE_SECTIONS = ("general", "pricing", "fulfillment", "details", "status")

    @staticmethod
    def section_fields(section: Any) -> List[str]:
        """Get the field names of a section dataclass."""
        return [f.name for f in fields(section)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "general": {
                name: getattr(self.general, name)
                for name in self.section_fields(self.general)
            },
            "media": {
                "primary": [image.to_dict() for image in self.media.primary],
                "secondary": [image.to_dict() for image in self.media.secondary],
            },
            "pricing": {
                "price_type": self.pricing.price_type.value,
                "sale_price": str(self.pricing.sale_price),
                "original_price": str(self.pricing.original_price),
                "has_discount": self.pricing.has_discount,
                "stock_quantity": self.pricing.stock_quantity,
            },
            "fulfillment": {
                "shipping_method": self.fulfillment.shipping_method,
                "free_shipping": self.fulfillment.free_shipping,
                "after_sales_enabled": self.fulfillment.after_sales_enabled,
                "returns_allowed": self.fulfillment.returns_allowed,
                "returns_window_days": self.fulfillment.returns_window_days,
                "after_sales_options": list(self.fulfillment.after_sales_options),
            },
            "details": {
                "description": self.details.description,
                "tags": list(self.details.tags),
            },
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ListingRecord":
        """Create from dictionary."""
        record = cls()

        for name, value in (data.get("general") or {}).items():
            if hasattr(record.general, name):
                setattr(record.general, name, value)

        media = data.get("media") or {}
        record.media.primary = [EncodedImage.from_dict(d) for d in media.get("primary", [])]
        record.media.secondary = [EncodedImage.from_dict(d) for d in media.get("secondary", [])]

        pricing = data.get("pricing") or {}
        if pricing:
            record.pricing.price_type = PriceType(pricing.get("price_type", "fixed"))
            record.pricing.sale_price = Decimal(str(pricing.get("sale_price", "0")))
            record.pricing.original_price = Decimal(str(pricing.get("original_price", "0")))
            record.pricing.has_discount = bool(pricing.get("has_discount", False))
            record.pricing.stock_quantity = int(pricing.get("stock_quantity", 0))

        for name, value in (data.get("fulfillment") or {}).items():
            if hasattr(record.fulfillment, name):
                setattr(record.fulfillment, name, value)

        details = data.get("details") or {}
        record.details.description = details.get("description", "")
        record.details.tags = list(details.get("tags", []))

        record.status = ListingStatus(data.get("status", "active"))
        return record
