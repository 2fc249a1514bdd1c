# -*- coding: utf-8 -*-
"""
Tests for the Listing Wizard window.

Tests cover:
- Wizard initialization
- Step navigation from the footer and the step indicator
- Field edits flowing into the record
- Busy label while publishing
"""

import pytest
from PyQt5.QtCore import Qt

from controllers.listing_wizard_controller import ListingWizardController
from services.media_intake import MediaIntake
from services.submission_service import SubmissionService
from ui.components.toast import Toast
from ui.wizards.listing import ListingWizard
from ui.wizards.listing.steps import GeneralStep, PricingStep


@pytest.fixture
def controller(qtbot, fake_encoder):
    controller = ListingWizardController(
        media_intake=MediaIntake(encoder=fake_encoder),
        submission_service=SubmissionService(delay_ms=50),
    )
    yield controller
    controller.shutdown()


@pytest.fixture
def wizard(qtbot, controller):
    """Create wizard instance for testing."""
    wizard = ListingWizard(controller=controller)
    qtbot.addWidget(wizard)
    wizard.show()
    yield wizard
    wizard.close()


class TestWizardInitialization:
    """Test wizard initialization and setup."""

    def test_wizard_has_five_steps(self, wizard):
        assert len(wizard.steps) == 5
        assert len(wizard.step_buttons) == 5
        assert isinstance(wizard.steps[0], GeneralStep)

    def test_starts_on_first_step(self, wizard):
        assert wizard.step_container.currentIndex() == 0
        assert wizard.btn_next.text() == "Next"
        assert wizard.progress_label.text() == "Step 1 of 5"
        assert wizard.step_buttons[0].isChecked()

    def test_creates_its_own_controller(self, qtbot):
        wizard = ListingWizard()
        qtbot.addWidget(wizard)

        assert isinstance(wizard.controller, ListingWizardController)
        wizard.close()


class TestWizardNavigation:
    """Test navigation through the window."""

    def test_next_with_empty_title_shows_error(self, qtbot, wizard):
        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)

        assert wizard.step_container.currentIndex() == 0
        assert not wizard.steps[0].error_label.isHidden()

    def test_typed_title_reaches_record_and_allows_next(self, qtbot, wizard, controller):
        qtbot.keyClicks(wizard.steps[0].title_input, "Lamp")

        assert controller.record.general.title == "Lamp"
        assert wizard.steps[0].title_counter.text() == "4/50"

        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)
        assert wizard.step_container.currentIndex() == 1
        assert wizard.progress_label.text() == "Step 2 of 5"

    def test_step_indicator_jumps_without_validation(self, qtbot, wizard):
        qtbot.mouseClick(wizard.step_buttons[4], Qt.LeftButton)

        assert wizard.step_container.currentIndex() == 4
        assert wizard.btn_next.text() == "Publish"

    def test_title_input_is_capped(self, qtbot, wizard, controller):
        qtbot.keyClicks(wizard.steps[0].title_input, "x" * 60)

        assert len(controller.record.general.title) == 50

    def test_attribute_combo_updates_record(self, wizard, controller):
        combo = wizard.steps[0].attribute_combos["brand"]
        combo.setCurrentIndex(combo.findData("brand2"))

        assert controller.record.general.brand == "brand2"


class TestPricingStep:
    """Test the pricing page."""

    def test_original_price_only_shown_when_discounted(self, qtbot, wizard, controller):
        controller.jump_to_step(2)
        step = wizard.steps[2]
        assert isinstance(step, PricingStep)
        assert step.original_price_input.isHidden()

        step.discount_checkbox.setChecked(True)

        assert not step.original_price_input.isHidden()
        assert controller.record.pricing.has_discount is True

    def test_sale_price_text_is_parsed(self, qtbot, wizard, controller):
        controller.jump_to_step(2)
        qtbot.keyClicks(wizard.steps[2].sale_price_input, "12.5")

        assert str(controller.record.pricing.sale_price) == "12.5"

    def test_stored_prices_are_shown_with_two_decimals(self, wizard, controller):
        controller.update_field("pricing", "sale_price", "12.5")
        controller.jump_to_step(2)

        assert wizard.steps[2].sale_price_input.text() == "12.50"
        assert wizard.steps[2].original_price_input.text() == ""


class TestSubmitFromWindow:
    """Test publishing through the footer button."""

    def test_busy_label_while_publishing(self, qtbot, wizard, controller):
        controller.update_field("general", "title", "Lamp")
        controller.add_images("primary", ["img1.png"])
        qtbot.waitUntil(lambda: len(controller.record.media.primary) == 1, timeout=5000)
        controller.update_field("pricing", "sale_price", "12.5")
        controller.jump_to_step(4)

        with qtbot.waitSignal(wizard.listing_published, timeout=2000):
            qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)
            assert wizard.btn_next.text() == "Publishing..."
            assert not wizard.btn_next.isEnabled()

        assert wizard.btn_next.text() == "Publish"
        assert wizard.btn_next.isEnabled()

    def test_failed_submit_shows_offending_step(self, qtbot, wizard):
        qtbot.mouseClick(wizard.step_buttons[4], Qt.LeftButton)
        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)

        assert wizard.step_container.currentIndex() == 0
        assert not wizard.steps[0].error_label.isHidden()

    def test_failed_rule_names_what_is_missing(self, qtbot, wizard, controller):
        controller.update_field("general", "title", "Lamp")
        qtbot.mouseClick(wizard.step_buttons[4], Qt.LeftButton)
        qtbot.mouseClick(wizard.btn_next, Qt.LeftButton)

        assert wizard.step_container.currentIndex() == 1
        toast = wizard.findChild(Toast, "toast")
        assert toast.text().startswith("Please upload product images")

    def test_validation_titles_by_field(self, wizard):
        assert wizard.get_validation_title("sale_price") == "Please set a valid price"
        assert wizard.get_validation_title("title") == "Please fill in required information"
