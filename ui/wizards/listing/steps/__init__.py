# -*- coding: utf-8 -*-
"""
Listing Steps Package.

Contains individual steps for the listing wizard:
- Step 1: Basic Information
- Step 2: Images & Media
- Step 3: Pricing & Stock
- Step 4: Services & Guarantees
- Step 5: Additional Info
"""

from .general_step import GeneralStep
from .media_step import MediaStep
from .pricing_step import PricingStep
from .fulfillment_step import FulfillmentStep
from .details_step import DetailsStep

__all__ = [
    'GeneralStep',
    'MediaStep',
    'PricingStep',
    'FulfillmentStep',
    'DetailsStep'
]
