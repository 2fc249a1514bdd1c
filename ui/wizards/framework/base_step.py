# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI
- populate_data(): Populate UI with data from the record

Steps never write to the record themselves; every edit goes through the
controller so validation stays in one place.
"""

from typing import Any, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel

from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Section header with completion counter
    - Field error display
    """

    # Step index in the wizard; set by subclasses
    STEP_INDEX = 0
    REQUIRED = False

    def __init__(self, controller, parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            controller: The wizard controller owning the record
            parent: Parent widget
        """
        super().__init__(parent)
        self.controller = controller
        self._is_initialized = False
        self._populating = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

        self.main_layout.addLayout(self._create_section_header())

        self.error_label = QLabel()
        self.error_label.setStyleSheet("color: #dc3545;")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        self.main_layout.addWidget(self.error_label)

        self.controller.data_changed.connect(self._update_completion)

    def _create_section_header(self) -> QHBoxLayout:
        header = QHBoxLayout()
        title = self.get_step_title()
        if self.REQUIRED:
            title = f"* {title}"
        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-size: 14pt; font-weight: bold;")
        header.addWidget(self.title_label)
        header.addStretch()
        self.completion_label = QLabel()
        self.completion_label.setStyleSheet("color: #6c757d;")
        header.addWidget(self.completion_label)
        return header

    def initialize(self):
        """
        Initialize the step (called once).

        This method is called the first time the step is shown.
        """
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the active step."""
        if not self._is_initialized:
            self.initialize()
        self.clear_field_error()
        self._populating = True
        try:
            self.populate_data()
        finally:
            self._populating = False
        self._update_completion()

    def on_hide(self):
        """Called when the step is hidden (moving to another step)."""
        pass

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        Create all widgets and layouts here, adding them to self.main_layout.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """
        Populate the step's UI with data from the record.

        Called every time the step is shown.
        """
        pass

    def get_step_title(self) -> str:
        """Get the step's title from the controller's step list."""
        return self.controller.navigator.get_step_title(self.STEP_INDEX)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def update_field(self, section: str, field: str, value: Any) -> bool:
        """Forward an edit to the controller; ignored while populating."""
        if self._populating:
            return True
        result = self.controller.update_field(section, field, value)
        if result.success:
            self.clear_field_error()
        return result.success

    def show_field_error(self, field: str, message: str):
        """Show a validation message for a field of this step."""
        logger.debug(f"{self.__class__.__name__}: {field} - {message}")
        self.error_label.setText(message)
        self.error_label.show()

    def clear_field_error(self):
        self.error_label.clear()
        self.error_label.hide()

    def _update_completion(self):
        filled, total = self.controller.section_completion(self.STEP_INDEX)
        if total:
            self.completion_label.setText(f"{filled}/{total} required")
        else:
            self.completion_label.clear()
