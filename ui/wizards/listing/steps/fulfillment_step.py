# -*- coding: utf-8 -*-
"""
Fulfillment Step - Step 4 of Listing Wizard.

Allows user to:
- Pick a shipping method
- Configure after-sales service and returns
- Choose the status the listing is published with
"""

from PyQt5.QtWidgets import (
    QLabel, QComboBox, QCheckBox, QRadioButton, QButtonGroup, QHBoxLayout, QSpinBox
)

from models.listing import ListingStatus
from services.wizard.step_validator import StepValidator
from ui.constants.listing_options import SHIPPING_METHOD_OPTIONS
from ui.wizards.framework import BaseStep


class FulfillmentStep(BaseStep):
    """Step 4: services, guarantees and status."""

    STEP_INDEX = StepValidator.STEP_FULFILLMENT

    def setup_ui(self):
        layout = self.main_layout

        layout.addWidget(QLabel("Shipping Method"))
        self.shipping_combo = QComboBox()
        self.shipping_combo.addItem("Please select", None)
        for value, text in SHIPPING_METHOD_OPTIONS:
            self.shipping_combo.addItem(text, value)
        self.shipping_combo.currentIndexChanged.connect(
            lambda _: self.update_field("fulfillment", "shipping_method", self.shipping_combo.currentData())
        )
        layout.addWidget(self.shipping_combo)

        self.free_shipping_checkbox = QCheckBox("Free shipping")
        self.free_shipping_checkbox.toggled.connect(
            lambda checked: self.update_field("fulfillment", "free_shipping", checked)
        )
        layout.addWidget(self.free_shipping_checkbox)

        self.after_sales_checkbox = QCheckBox("Offer after-sales service")
        self.after_sales_checkbox.toggled.connect(
            lambda checked: self.update_field("fulfillment", "after_sales_enabled", checked)
        )
        layout.addWidget(self.after_sales_checkbox)

        # Returns
        returns_row = QHBoxLayout()
        self.returns_group = QButtonGroup(self)
        self.returns_yes = QRadioButton("Returns accepted")
        self.returns_no = QRadioButton("No returns")
        for button in (self.returns_yes, self.returns_no):
            self.returns_group.addButton(button)
            returns_row.addWidget(button)
        self.returns_yes.toggled.connect(
            lambda checked: self.update_field("fulfillment", "returns_allowed", checked)
        )
        returns_row.addWidget(QLabel("within"))
        self.returns_window_input = QSpinBox()
        self.returns_window_input.setRange(0, 365)
        self.returns_window_input.setSuffix(" days")
        self.returns_window_input.valueChanged.connect(
            lambda days: self.update_field("fulfillment", "returns_window_days", days)
        )
        returns_row.addWidget(self.returns_window_input)
        returns_row.addStretch()
        layout.addLayout(returns_row)

        # Status
        layout.addWidget(QLabel("Listing Status"))
        status_row = QHBoxLayout()
        self.status_group = QButtonGroup(self)
        self.status_buttons = {}
        for status, text in ((ListingStatus.ACTIVE, "Active"), (ListingStatus.INACTIVE, "Inactive")):
            button = QRadioButton(text)
            self.status_group.addButton(button)
            self.status_buttons[status] = button
            button.toggled.connect(
                lambda checked, s=status: checked and self.update_field("status", "status", s.value)
            )
            status_row.addWidget(button)
        status_row.addStretch()
        layout.addLayout(status_row)
        layout.addStretch()

    def populate_data(self):
        record = self.controller.record
        fulfillment = record.fulfillment
        index = self.shipping_combo.findData(fulfillment.shipping_method)
        self.shipping_combo.setCurrentIndex(max(index, 0))
        self.free_shipping_checkbox.setChecked(fulfillment.free_shipping)
        self.after_sales_checkbox.setChecked(fulfillment.after_sales_enabled)
        (self.returns_yes if fulfillment.returns_allowed else self.returns_no).setChecked(True)
        self.returns_window_input.setValue(fulfillment.returns_window_days)
        self.status_buttons[record.status].setChecked(True)
