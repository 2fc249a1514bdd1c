# -*- coding: utf-8 -*-
"""
Catalog Listing Data Models
"""

from .media import EncodedImage
from .listing import (
    FulfillmentInfo,
    GeneralInfo,
    ListingDetails,
    ListingRecord,
    ListingStatus,
    MediaInfo,
    MediaSlotName,
    PriceType,
    PricingInfo,
)

__all__ = [
    "EncodedImage",
    "FulfillmentInfo",
    "GeneralInfo",
    "ListingDetails",
    "ListingRecord",
    "ListingStatus",
    "MediaInfo",
    "MediaSlotName",
    "PriceType",
    "PricingInfo",
]
