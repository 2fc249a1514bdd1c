# -*- coding: utf-8 -*-
"""
General Step - Step 1 of Listing Wizard.

Allows user to:
- Enter the listing title (required, at most 50 characters)
- Pick the categorical attributes of the item
"""

from PyQt5.QtWidgets import QLabel, QLineEdit, QComboBox, QGridLayout, QHBoxLayout

from app.config import Config
from services.wizard.step_validator import StepValidator
from ui.constants.listing_options import GENERAL_ATTRIBUTES
from ui.wizards.framework import BaseStep
from utils.logger import get_logger

logger = get_logger(__name__)


class GeneralStep(BaseStep):
    """Step 1: title and attributes."""

    STEP_INDEX = StepValidator.STEP_GENERAL
    REQUIRED = True

    def setup_ui(self):
        layout = self.main_layout

        # Title row with character counter
        layout.addWidget(QLabel("* Product Title"))
        title_row = QHBoxLayout()
        self.title_input = QLineEdit()
        self.title_input.setMaxLength(Config.TITLE_MAX_LENGTH)
        self.title_input.setPlaceholderText("Please enter the product title")
        self.title_input.textChanged.connect(self._on_title_changed)
        title_row.addWidget(self.title_input, 1)

        self.title_counter = QLabel()
        self.title_counter.setStyleSheet("color: #6c757d;")
        title_row.addWidget(self.title_counter)
        layout.addLayout(title_row)
        self._update_counter("")

        # Attributes, two per row
        grid = QGridLayout()
        grid.setHorizontalSpacing(24)
        grid.setVerticalSpacing(8)
        self.attribute_combos = {}
        for i, (field, label, options) in enumerate(GENERAL_ATTRIBUTES):
            combo = QComboBox()
            combo.addItem("Please select", None)
            for value, text in options:
                combo.addItem(text, value)
            combo.currentIndexChanged.connect(
                lambda _, f=field, c=combo: self.update_field("general", f, c.currentData())
            )
            row, col = divmod(i, 2)
            grid.addWidget(QLabel(label), row * 2, col)
            grid.addWidget(combo, row * 2 + 1, col)
            self.attribute_combos[field] = combo
        layout.addLayout(grid)
        layout.addStretch()

    def populate_data(self):
        general = self.controller.record.general
        self.title_input.setText(general.title)
        for field, combo in self.attribute_combos.items():
            index = combo.findData(getattr(general, field))
            combo.setCurrentIndex(max(index, 0))

    def _on_title_changed(self, text: str):
        self._update_counter(text)
        self.update_field("general", "title", text)

    def _update_counter(self, text: str):
        self.title_counter.setText(f"{len(text)}/{Config.TITLE_MAX_LENGTH}")
