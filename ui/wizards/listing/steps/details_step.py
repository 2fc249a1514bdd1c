# -*- coding: utf-8 -*-
"""
Details Step - Step 5 of Listing Wizard.

Free text description and search tags. Nothing here is required.
"""

from PyQt5.QtWidgets import QLabel, QLineEdit, QTextEdit

from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BaseStep


class DetailsStep(BaseStep):
    """Step 5: description and tags."""

    STEP_INDEX = StepValidator.STEP_DETAILS

    def setup_ui(self):
        layout = self.main_layout

        layout.addWidget(QLabel("Description"))
        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Describe the item")
        self.description_input.textChanged.connect(
            lambda: self.update_field("details", "description", self.description_input.toPlainText())
        )
        layout.addWidget(self.description_input, 1)

        layout.addWidget(QLabel("Tags"))
        self.tags_input = QLineEdit()
        self.tags_input.setPlaceholderText("Comma separated, e.g. handmade, gift")
        self.tags_input.editingFinished.connect(
            lambda: self.update_field("details", "tags", self.tags_input.text())
        )
        layout.addWidget(self.tags_input)

    def populate_data(self):
        details = self.controller.record.details
        if self.description_input.toPlainText() != details.description:
            self.description_input.setPlainText(details.description)
        self.tags_input.setText(", ".join(details.tags))
