# -*- coding: utf-8 -*-
"""
Selectable options for the listing form.

Each list holds (value, label) pairs; the value is what gets stored in the
listing record.
"""

CATEGORY_OPTIONS = [
    ("apparel", "Apparel"),
    ("home", "Home & Living"),
    ("accessories", "Accessories"),
    ("crafts", "Arts & Crafts"),
]

BRAND_OPTIONS = [
    ("brand1", "Brand 1"),
    ("brand2", "Brand 2"),
    ("brand3", "Brand 3"),
]

AUDIENCE_OPTIONS = [
    ("all", "Universal"),
    ("men", "Men"),
    ("women", "Women"),
    ("children", "Children"),
]

MATERIAL_OPTIONS = [
    ("cotton", "Cotton"),
    ("linen", "Linen"),
    ("silk", "Silk"),
    ("wool", "Wool"),
]

STYLE_OPTIONS = [
    ("casual", "Casual"),
    ("formal", "Formal"),
    ("sport", "Sports"),
]

FEATURE_OPTIONS = [
    ("option1", "Option 1"),
    ("option2", "Option 2"),
    ("option3", "Option 3"),
]

CRAFT_OPTIONS = [
    ("manual", "Handcrafted"),
    ("machine", "Machine-made"),
    ("custom", "Custom"),
]

PACKAGING_OPTIONS = [
    ("paper", "Paper"),
    ("plastic", "Plastic"),
    ("cloth", "Cloth"),
    ("wood", "Wood"),
]

SHIPPING_METHOD_OPTIONS = [
    ("free", "Free Shipping"),
    ("flat", "Flat Rate"),
    ("weight", "Weight-based"),
    ("quantity", "Quantity-based"),
]

# Field name in GeneralInfo -> (label, options)
GENERAL_ATTRIBUTES = [
    ("category", "Category", CATEGORY_OPTIONS),
    ("brand", "Brand", BRAND_OPTIONS),
    ("audience", "Target Audience", AUDIENCE_OPTIONS),
    ("material", "Material", MATERIAL_OPTIONS),
    ("style", "Style", STYLE_OPTIONS),
    ("feature", "Features", FEATURE_OPTIONS),
    ("craft", "Manufacturing Process", CRAFT_OPTIONS),
    ("packaging", "Packaging Material", PACKAGING_OPTIONS),
]
