# -*- coding: utf-8 -*-
"""
Pricing Step - Step 3 of Listing Wizard.

Allows user to:
- Choose fixed (ready to ship) or staged (pre-order) pricing
- Enter sale price and stock
- Mark the item as discounted and enter the original price
"""

from decimal import Decimal

from PyQt5.QtWidgets import (
    QLabel, QLineEdit, QRadioButton, QButtonGroup, QCheckBox, QHBoxLayout, QGridLayout
)
from PyQt5.QtCore import QLocale
from PyQt5.QtGui import QDoubleValidator, QIntValidator

from models.listing import PriceType
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep
from utils.helpers import format_price


def _price_text(value: Decimal) -> str:
    return format_price(value) if value else ""


class PricingStep(BaseStep):
    """Step 3: price and stock."""

    STEP_INDEX = StepValidator.STEP_PRICING
    REQUIRED = True

    def setup_ui(self):
        layout = self.main_layout

        # Price type
        type_row = QHBoxLayout()
        self.price_type_group = QButtonGroup(self)
        self.price_type_buttons = {}
        for price_type, text in ((PriceType.FIXED, "Ready to ship"),
                                 (PriceType.STAGED, "Pre-order / customized")):
            button = QRadioButton(text)
            self.price_type_group.addButton(button)
            self.price_type_buttons[price_type] = button
            button.toggled.connect(
                lambda checked, t=price_type: checked and self.update_field("pricing", "price_type", t.value)
            )
            type_row.addWidget(button)
        type_row.addStretch()
        layout.addLayout(type_row)

        grid = QGridLayout()
        grid.setHorizontalSpacing(24)

        grid.addWidget(QLabel("* Sale Price"), 0, 0)
        self.sale_price_input = QLineEdit()
        self.sale_price_input.setValidator(self._price_validator())
        self.sale_price_input.setPlaceholderText("0.00")
        self.sale_price_input.textChanged.connect(
            lambda text: self.update_field("pricing", "sale_price", text)
        )
        grid.addWidget(self.sale_price_input, 1, 0)

        grid.addWidget(QLabel("Stock"), 0, 1)
        self.stock_input = QLineEdit()
        self.stock_input.setValidator(QIntValidator(0, 10 ** 9, self))
        self.stock_input.setPlaceholderText("0")
        self.stock_input.textChanged.connect(
            lambda text: self.update_field("pricing", "stock_quantity", text)
        )
        grid.addWidget(self.stock_input, 1, 1)
        layout.addLayout(grid)

        # Discount
        self.discount_checkbox = QCheckBox("This item is discounted")
        self.discount_checkbox.toggled.connect(self._on_discount_toggled)
        layout.addWidget(self.discount_checkbox)

        self.original_price_label = QLabel("Original Price")
        layout.addWidget(self.original_price_label)
        self.original_price_input = QLineEdit()
        self.original_price_input.setValidator(self._price_validator())
        self.original_price_input.setPlaceholderText("0.00")
        self.original_price_input.textChanged.connect(
            lambda text: self.update_field("pricing", "original_price", text)
        )
        layout.addWidget(self.original_price_input)
        layout.addStretch()

    def populate_data(self):
        pricing = self.controller.record.pricing
        self.price_type_buttons[pricing.price_type].setChecked(True)
        self.sale_price_input.setText(_price_text(pricing.sale_price))
        self.stock_input.setText(str(pricing.stock_quantity) if pricing.stock_quantity else "")
        self.discount_checkbox.setChecked(pricing.has_discount)
        self.original_price_input.setText(_price_text(pricing.original_price))
        self._set_original_price_visible(pricing.has_discount)

    def _on_discount_toggled(self, checked: bool):
        self._set_original_price_visible(checked)
        self.update_field("pricing", "has_discount", checked)

    def _set_original_price_visible(self, visible: bool):
        self.original_price_label.setVisible(visible)
        self.original_price_input.setVisible(visible)

    def _price_validator(self) -> QDoubleValidator:
        # Record amounts always use "." as the decimal point
        validator = QDoubleValidator(0, 1e9, 2, self)
        validator.setNotation(QDoubleValidator.StandardNotation)
        validator.setLocale(QLocale.c())
        return validator
