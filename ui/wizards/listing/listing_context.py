# -*- coding: utf-8 -*-
"""
Listing Context - Manages state and data for the listing wizard.

This context extends WizardContext with the one ListingRecord edited by
the session. The record is created here with defaults and is never
replaced, only mutated in place.
"""

from typing import Any, Dict, Tuple

from ui.wizards.framework.wizard_context import WizardContext
from models.listing import ListingRecord
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


class ListingContext(WizardContext):
    """Context for the catalog listing wizard."""

    def __init__(self):
        """Initialize listing context."""
        super().__init__()
        self._record = ListingRecord()

        # Publish API response (set after a successful submit)
        self.publish_response: Dict[str, Any] = {}

    @property
    def record(self) -> ListingRecord:
        return self._record

    def _get_reference_prefix(self) -> str:
        """Override to use listing-specific prefix."""
        return "LST"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        base_data = super().to_dict()
        base_data.update({
            "record": self._record.to_dict(),
            "publish_response": dict(self.publish_response),
        })
        return base_data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ListingContext':
        """Restore context from dictionary."""
        ctx = cls()
        cls._restore_base_fields(ctx, data)
        ctx._record = ListingRecord.from_dict(data.get("record") or {})
        ctx.publish_response = dict(data.get("publish_response") or {})
        return ctx

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def section_completion(self, step_index: int) -> Tuple[int, int]:
        """
        Get (filled, total) for the required fields of a step.

        Steps without required fields return (0, 0).
        """
        record = self._record
        if step_index == StepValidator.STEP_GENERAL:
            return (1 if record.general.title else 0), 1
        if step_index == StepValidator.STEP_MEDIA:
            return (1 if record.media.primary else 0), 1
        if step_index == StepValidator.STEP_PRICING:
            return (1 if record.pricing.sale_price > 0 else 0), 1
        return 0, 0
