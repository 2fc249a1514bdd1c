# -*- coding: utf-8 -*-
"""
Catalog Listing Controllers
===========================
Controller layer between the wizard UI and the listing data.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates
- Validation and business rules

Usage:
    from controllers import ListingWizardController

    controller = ListingWizardController()
    result = controller.request_advance()
    if not result.success:
        print(f"Error: {result.message}")
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Domain controllers
from controllers.listing_wizard_controller import ListingWizardController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Listing
    "ListingWizardController",
]
