# -*- coding: utf-8 -*-
"""
Listing Wizard Controller
=========================
Owns one listing session and gates every change to it.

The presentation layer calls the command methods below and listens to the
signals; it never writes to the record directly. Commands return an
OperationResult. Recoverable problems (validation, capacity) come back as
failed results plus a signal; caller bugs (unknown fields, bad image
indices) raise.

Submission state machine: idle -> submitting -> idle. While submitting,
advance, retreat, save draft and submit are rejected.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from PyQt5.QtCore import pyqtSignal, pyqtSlot

from app.config import Config
from controllers.base_controller import BaseController, OperationResult
from models.listing import ListingRecord, ListingStatus, MediaSlotName, PriceType
from services.exceptions import (
    CapacityExceededException,
    ValidationException,
    WizardBusyException,
)
from services.media_intake import MediaIntake
from services.submission_service import SubmissionService
from services.wizard.step_validator import StepValidator
from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.listing.listing_context import ListingContext
from utils.helpers import parse_bool, parse_decimal, parse_int, parse_tags
from utils.logger import get_logger

logger = get_logger(__name__)


class ListingWizardController(BaseController):
    """
    Controller for the catalog listing wizard.

    Signals:
        step_changed(int, int): old and new step index
        scroll_to_top_requested(): the view should reset its scroll position
        validation_failed(object): ValidationException to show the user
        capacity_exceeded(str, int): slot name and its cap
        image_decode_failed(str, str, str): slot name, file name, reason
        draft_saved(dict): session snapshot at the time of the save
        submit_succeeded(dict): publish response
        submit_failed(str): publish error message

    Inherited: data_changed() after every record change, loading_changed(bool)
    carrying the submitting flag.
    """

    step_changed = pyqtSignal(int, int)
    scroll_to_top_requested = pyqtSignal()
    validation_failed = pyqtSignal(object)
    capacity_exceeded = pyqtSignal(str, int)
    image_decode_failed = pyqtSignal(str, str, str)
    draft_saved = pyqtSignal(dict)
    submit_succeeded = pyqtSignal(dict)
    submit_failed = pyqtSignal(str)

    def __init__(
        self,
        context: Optional[ListingContext] = None,
        media_intake: Optional[MediaIntake] = None,
        submission_service: Optional[SubmissionService] = None,
        step_titles: Optional[Iterable[str]] = None,
        require_shipping_method: Optional[bool] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.context = context or ListingContext()
        self.navigator = StepNavigator(
            list(step_titles or Config.WIZARD_STEPS), self.context, self
        )
        self.media_intake = media_intake or MediaIntake(parent=self)
        self.submission_service = submission_service or SubmissionService(parent=self)
        self._require_shipping_method = require_shipping_method

        self.navigator.step_changed.connect(self._on_step_changed)
        self.media_intake.images_changed.connect(self._on_images_changed)
        self.media_intake.decode_failed.connect(self.image_decode_failed)
        self.submission_service.succeeded.connect(self._on_submit_succeeded)
        self.submission_service.failed.connect(self._on_submit_failed)

        logger.info(f"Listing session started: {self.context.reference_number}")

    # =========================================================================
    # State
    # =========================================================================

    @property
    def record(self) -> ListingRecord:
        """The session's record. Read it; change it through commands."""
        return self.context.record

    @property
    def current_step(self) -> int:
        return self.navigator.current_index

    @property
    def step_count(self) -> int:
        return self.navigator.get_step_count()

    @property
    def is_submitting(self) -> bool:
        return self.is_loading

    def snapshot(self) -> Dict[str, Any]:
        """Read-only view of the session for rendering."""
        data = self.context.to_dict()
        data["current_step"] = self.current_step
        data["is_submitting"] = self.is_submitting
        return data

    def section_completion(self, step_index: int) -> Tuple[int, int]:
        return self.context.section_completion(step_index)

    # =========================================================================
    # Navigation
    # =========================================================================

    def request_advance(self) -> OperationResult:
        """Move forward one step, gated by the current step's rules."""
        rejected = self._reject_if_busy("advance")
        if rejected:
            return rejected

        current = self.navigator.current_index
        try:
            StepValidator.check_advance(current, self.record)
        except ValidationException as e:
            return self._validation_failure(e, redirect=False)

        self.context.mark_step_completed(current)
        self.navigator.next_step()
        return OperationResult.ok(data=self.current_step)

    def request_retreat(self) -> OperationResult:
        """Move back one step; never validated."""
        rejected = self._reject_if_busy("go back")
        if rejected:
            return rejected

        self.navigator.previous_step()
        return OperationResult.ok(data=self.current_step)

    def jump_to_step(self, index: int) -> OperationResult:
        """Jump from a step indicator click; clamped, never validated."""
        self.navigator.goto_step(index)
        return OperationResult.ok(data=self.current_step)

    # =========================================================================
    # Field edits
    # =========================================================================

    def update_field(self, section: str, field: str, value: Any) -> OperationResult:
        """
        Apply one form field edit to the record.

        Args:
            section: general, pricing, fulfillment, details or status
            field: Field name inside the section ("status" for the status section)
            value: New value as entered

        Returns:
            OperationResult with the stored value

        Raises:
            KeyError: for an unknown section or field
            ValueError: for a price type, status or yes/no flag outside its vocabulary
        """
        if section not in ListingRecord.EDITABLE_SECTIONS:
            raise KeyError(f"Unknown section: {section}")

        if section == "status":
            if field != "status":
                raise KeyError(f"Unknown field: {section}.{field}")
            self.record.status = ListingStatus(value)
            return self._field_applied(section, field, self.record.status)

        target = getattr(self.record, section)
        if field not in ListingRecord.section_fields(target):
            raise KeyError(f"Unknown field: {section}.{field}")

        try:
            coerced = self._coerce(section, field, value)
        except ValidationException as e:
            return self._validation_failure(e, redirect=False)

        setattr(target, field, coerced)
        return self._field_applied(section, field, coerced)

    def _coerce(self, section: str, field: str, value: Any) -> Any:
        """Convert an entered value to the type stored in the record."""
        if section == "general":
            if field == "title":
                title = str(value or "")
                StepValidator.check_title(title)
                return title
            return value or None

        if section == "pricing":
            if field == "price_type":
                return PriceType(value)
            if field in ("sale_price", "original_price"):
                amount = parse_decimal(value)
                StepValidator.check_non_negative(amount, field, StepValidator.STEP_PRICING)
                return amount
            if field == "stock_quantity":
                quantity = parse_int(value)
                StepValidator.check_non_negative(quantity, field, StepValidator.STEP_PRICING)
                return quantity
            return parse_bool(value)

        if section == "fulfillment":
            if field == "shipping_method":
                return value or None
            if field == "returns_window_days":
                return parse_int(value)
            if field == "after_sales_options":
                return list(value or [])
            return parse_bool(value)

        # details
        if field == "tags":
            return parse_tags(value)
        return str(value or "")

    def _field_applied(self, section: str, field: str, value: Any) -> OperationResult:
        self.context.touch()
        logger.debug(f"Field updated: {section}.{field}")
        self.data_changed.emit()
        return OperationResult.ok(data=value)

    # =========================================================================
    # Media
    # =========================================================================

    def add_images(self, slot: Union[MediaSlotName, str], files: Iterable[Any]) -> OperationResult:
        """
        Hand a batch of selected files to a media slot.

        The batch is rejected as a whole when it would exceed the slot cap.
        Decoded images arrive later through data_changed.
        """
        try:
            started = self.media_intake.accept(slot, files)
        except CapacityExceededException as e:
            logger.warning(f"Upload limit exceeded for {e.slot}: cap {e.cap}")
            self.capacity_exceeded.emit(e.slot, e.cap)
            return OperationResult.fail(e.message, errors=[e.slot], error=e)
        return OperationResult.ok(data=started)

    def remove_image(self, slot: Union[MediaSlotName, str], index: int) -> OperationResult:
        """
        Remove one image from a slot.

        Raises:
            IndexOutOfRangeException: if index is not in the slot
        """
        removed = self.media_intake.remove(slot, index)
        return OperationResult.ok(data=removed)

    @pyqtSlot(str, list)
    def _on_images_changed(self, slot_name: str, images: List):
        setattr(self.record.media, MediaSlotName(slot_name).value, list(images))
        self.context.touch()
        self.data_changed.emit()

    # =========================================================================
    # Draft & submit
    # =========================================================================

    def save_draft(self) -> OperationResult:
        """Signal a draft save; no validation is applied."""
        rejected = self._reject_if_busy("save a draft")
        if rejected:
            return rejected

        self.context.mark_draft_saved()
        snapshot = self.snapshot()
        logger.info(
            f"Draft saved: {self.context.reference_number} (#{self.context.draft_count})"
        )
        self.draft_saved.emit(snapshot)
        return OperationResult.ok(data=snapshot, message="Draft saved")

    def submit(self) -> OperationResult:
        """
        Validate the whole record and start publishing it.

        Rules run in fixed order (title, primary images, sale price) and the
        first failure moves the wizard to the offending step.

        Returns:
            OperationResult; success means publishing has started, the
            outcome arrives via submit_succeeded or submit_failed
        """
        rejected = self._reject_if_busy("submit")
        if rejected:
            return rejected

        try:
            StepValidator.check_submit(self.record, self._require_shipping_method)
        except ValidationException as e:
            return self._validation_failure(e, redirect=True)

        payload = self.record.to_dict()
        payload["reference_number"] = self.context.reference_number

        self.context.status = ListingContext.STATUS_SUBMITTING
        self._emit_started("submit")
        try:
            self.submission_service.publish(payload)
        except WizardBusyException as e:
            self.context.status = ListingContext.STATUS_DRAFT
            self._emit_error("submit", e.message)
            return OperationResult.fail(e.message, error=e)

        return OperationResult.ok(message="Publishing")

    @pyqtSlot(dict)
    def _on_submit_succeeded(self, response: Dict[str, Any]):
        self.context.status = ListingContext.STATUS_COMPLETED
        self.context.publish_response = dict(response)
        self.context.touch()
        self._emit_completed("submit", True)
        self.submit_succeeded.emit(dict(response))

    @pyqtSlot(str)
    def _on_submit_failed(self, message: str):
        self.context.status = ListingContext.STATUS_DRAFT
        self._emit_error("submit", message)
        self.submit_failed.emit(message)

    # =========================================================================
    # Session
    # =========================================================================

    def shutdown(self, timeout_ms: int = 30000) -> bool:
        """Wait for image decodes still running; they cannot be cancelled."""
        return self.media_intake.wait_for_pending(timeout_ms)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _reject_if_busy(self, operation: str) -> Optional[OperationResult]:
        if not self.is_submitting:
            return None
        error = WizardBusyException(operation)
        logger.warning(error.message)
        return OperationResult.fail(error.message, error=error)

    def _validation_failure(self, error: ValidationException, redirect: bool) -> OperationResult:
        logger.warning(f"Validation failed on step {error.step}: {error}")
        if redirect and error.step is not None:
            self.navigator.goto_step(error.step)
        self.validation_failed.emit(error)
        return OperationResult.fail(error.message, errors=[error.field], error=error)

    @pyqtSlot(int, int)
    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_changed.emit(old_index, new_index)
        self.scroll_to_top_requested.emit()
