# -*- coding: utf-8 -*-
"""
Listing Wizard Package.

Five-step workflow for publishing a catalog item.

This package contains:
- ListingContext: Wizard context owning the listing record
- ListingWizard: Main wizard window
- Steps: One page per wizard step
"""

from .listing_context import ListingContext

__all__ = [
    'ListingContext',
    'ListingWizard'
]


def __getattr__(name):
    """Lazy import; the window depends on the controller, which depends on the context."""
    if name == "ListingWizard":
        from .listing_wizard import ListingWizard
        return ListingWizard
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
