# -*- coding: utf-8 -*-
"""
Step validation service for the Listing Wizard.

Validates record data for each step without UI coupling.
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from app.config import Config
from models.listing import ListingRecord
from services.exceptions import ValidationException


class StepValidator:
    """Validates wizard step data based on the listing record."""

    # Step constants
    STEP_GENERAL = 0
    STEP_MEDIA = 1
    STEP_PRICING = 2
    STEP_FULFILLMENT = 3
    STEP_DETAILS = 4

    # Field identifiers reported with failures
    FIELD_TITLE = "title"
    FIELD_PRIMARY_IMAGES = "primary_images"
    FIELD_SALE_PRICE = "sale_price"
    FIELD_SHIPPING_METHOD = "shipping_method"

    @staticmethod
    def validate_step(step_index: int, record: ListingRecord) -> Tuple[bool, str]:
        """
        Validate the data needed to leave a step going forward.

        Only the first step gates forward navigation; the rest are checked
        at submit time.

        Args:
            step_index: Current step index
            record: ListingRecord being edited

        Returns:
            Tuple of (is_valid, error_message)
        """
        if step_index == StepValidator.STEP_GENERAL:
            if not record.general.title:
                return False, "Product title is required"
            return True, ""

        return True, ""

    @staticmethod
    def check_advance(step_index: int, record: ListingRecord) -> None:
        """
        Raise if the record does not allow moving past step_index.

        Raises:
            ValidationException: with the failing field and step
        """
        is_valid, message = StepValidator.validate_step(step_index, record)
        if not is_valid:
            raise ValidationException(message, field=StepValidator.FIELD_TITLE,
                                      step=step_index)

    @staticmethod
    def submit_failures(record: ListingRecord,
                        require_shipping_method: Optional[bool] = None) -> List[ValidationException]:
        """
        Evaluate every submit rule in order.

        Args:
            record: ListingRecord being submitted
            require_shipping_method: Override Config.REQUIRE_SHIPPING_METHOD

        Returns:
            Failures in rule order (empty when the record can be submitted)
        """
        if require_shipping_method is None:
            require_shipping_method = Config.REQUIRE_SHIPPING_METHOD

        failures = []
        if not record.general.title:
            failures.append(ValidationException(
                "Product title is required",
                field=StepValidator.FIELD_TITLE, step=StepValidator.STEP_GENERAL))

        if len(record.media.primary) == 0:
            failures.append(ValidationException(
                "At least one main image is required",
                field=StepValidator.FIELD_PRIMARY_IMAGES, step=StepValidator.STEP_MEDIA))

        if record.pricing.sale_price <= Decimal("0"):
            failures.append(ValidationException(
                "Sale price must be greater than 0",
                field=StepValidator.FIELD_SALE_PRICE, step=StepValidator.STEP_PRICING))

        if require_shipping_method and not record.fulfillment.shipping_method:
            failures.append(ValidationException(
                "Please select a shipping method",
                field=StepValidator.FIELD_SHIPPING_METHOD, step=StepValidator.STEP_FULFILLMENT))

        return failures

    @staticmethod
    def check_submit(record: ListingRecord,
                     require_shipping_method: Optional[bool] = None) -> None:
        """
        Raise the first failing submit rule.

        Raises:
            ValidationException: title, then primary images, then sale price
        """
        failures = StepValidator.submit_failures(record, require_shipping_method)
        if failures:
            raise failures[0]

    @staticmethod
    def check_title(title: str) -> None:
        """Raise if a title edit exceeds the allowed length."""
        if len(title) > Config.TITLE_MAX_LENGTH:
            raise ValidationException(
                f"Product title cannot exceed {Config.TITLE_MAX_LENGTH} characters",
                field=StepValidator.FIELD_TITLE, step=StepValidator.STEP_GENERAL)

    @staticmethod
    def check_non_negative(value, field: str, step: int) -> None:
        """Raise if a numeric edit is negative."""
        if value < 0:
            raise ValidationException(f"{field} cannot be negative", field=field, step=step)