# -*- coding: utf-8 -*-
"""
Listing Wizard.

Multi-step wizard for publishing a catalog item.

Steps:
1. Basic Information - Title and attributes
2. Images & Media - Main and detail images
3. Pricing & Stock - Price type, price, stock, discount
4. Services & Guarantees - Shipping, returns, status
5. Additional Info - Description and tags
"""

from typing import List

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.listing_wizard_controller import ListingWizardController
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.listing.steps import (
    GeneralStep,
    MediaStep,
    PricingStep,
    FulfillmentStep,
    DetailsStep
)
from utils.logger import get_logger

logger = get_logger(__name__)


class ListingWizard(BaseWizard):
    """
    Listing Wizard.

    Guides a seller through creating a catalog listing and publishing it.
    """

    # Signals (aliases for BaseWizard signals)
    listing_published = pyqtSignal(dict)
    listing_saved_draft = pyqtSignal(dict)

    VALIDATION_TITLES = {
        StepValidator.FIELD_PRIMARY_IMAGES: "Please upload product images",
        StepValidator.FIELD_SALE_PRICE: "Please set a valid price",
        StepValidator.FIELD_SHIPPING_METHOD: "Please choose a shipping method",
    }

    def __init__(self, controller: ListingWizardController = None, parent=None):
        """Initialize the wizard."""
        super().__init__(controller, parent)

        self.wizard_completed.connect(self.listing_published.emit)
        self.draft_saved.connect(self.listing_saved_draft.emit)

    def create_controller(self) -> ListingWizardController:
        """Create the controller when none is injected."""
        return ListingWizardController(parent=self)

    def create_steps(self) -> List[BaseStep]:
        """Create and return list of wizard steps."""
        return [
            GeneralStep(self.controller, self),
            MediaStep(self.controller, self),
            PricingStep(self.controller, self),
            FulfillmentStep(self.controller, self),
            DetailsStep(self.controller, self)
        ]

    def get_wizard_title(self) -> str:
        return Config.APP_TITLE

    def get_submit_button_text(self) -> str:
        return "Publish"

    def get_busy_button_text(self) -> str:
        return "Publishing..."

    def get_validation_title(self, field: str) -> str:
        return self.VALIDATION_TITLES.get(field, super().get_validation_title(field))

    def closeEvent(self, event):
        """Let running decodes finish before the window goes away."""
        self.controller.shutdown()
        logger.info("Listing wizard closed")
        super().closeEvent(event)
