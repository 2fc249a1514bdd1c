# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for wizard windows.

Provides unified wizard UI with:
- Header with title and progress
- Clickable step indicator
- Scrollable step container
- Footer buttons (Previous, Save Draft, Next / Submit)
- Notifications for validation, draft and submit outcomes

The window only renders controller state and forwards user events; every
decision is made by the controller.
"""

from typing import List, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar, QScrollArea
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from .base_step import BaseStep
from ui.components.toast import Toast
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_controller(): Create the controller driving the wizard
    - create_steps(): Create and return the list of step widgets
    """

    # Signals
    wizard_completed = pyqtSignal(dict)  # Emitted with the publish response
    draft_saved = pyqtSignal(dict)  # Emitted with the session snapshot

    def __init__(self, controller=None, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)

        self.controller = controller if controller is not None else self.create_controller()
        self.steps = self.create_steps()
        self.step_buttons: List[QPushButton] = []

        self._setup_ui()
        self._connect_controller()

        # Show first step
        self._show_step(self.controller.current_step)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_controller(self):
        """
        Create and return the wizard controller.

        Returns:
            Controller instance
        """
        pass

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """
        Create and return list of wizard steps.

        Returns:
            List of BaseStep instances
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        """Get wizard title. Override to customize."""
        return "Wizard"

    def get_submit_button_text(self) -> str:
        """Get submit button text. Override to customize."""
        return "Submit"

    def get_busy_button_text(self) -> str:
        """Get submit button text while submitting."""
        return "Submitting..."

    def get_validation_title(self, field: str) -> str:
        """Get the notification title for a failed rule. Override per field."""
        return "Please fill in required information"

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())
        main_layout.addWidget(self._create_step_indicator())

        # Separator
        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet("background-color: #ddd;")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Step container
        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.scroll_area.setWidget(self.step_container)
        main_layout.addWidget(self.scroll_area, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title and progress."""
        header = QWidget()
        header.setStyleSheet("background-color: #f8f9fa;")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel()
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)
        return header

    def _create_step_indicator(self) -> QWidget:
        """Create one clickable tab per step."""
        indicator = QWidget()
        layout = QHBoxLayout(indicator)
        layout.setContentsMargins(20, 0, 20, 0)
        layout.setSpacing(0)

        navigator = self.controller.navigator
        for index in range(navigator.get_step_count()):
            button = QPushButton(navigator.get_step_title(index))
            button.setFlat(True)
            button.setCheckable(True)
            button.clicked.connect(lambda _, i=index: self.controller.jump_to_step(i))
            layout.addWidget(button, 1)
            self.step_buttons.append(button)
        return indicator

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        footer.setStyleSheet("background-color: #f8f9fa;")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_previous = QPushButton("Previous")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_save_draft = QPushButton("Save Draft")
        self.btn_save_draft.clicked.connect(self._handle_save_draft)
        layout.addWidget(self.btn_save_draft)

        self.btn_next = QPushButton("Next")
        self.btn_next.setDefault(True)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    def _connect_controller(self):
        controller = self.controller
        controller.step_changed.connect(self._on_step_changed)
        controller.scroll_to_top_requested.connect(self._scroll_to_top)
        controller.loading_changed.connect(self._update_navigation_buttons)
        controller.validation_failed.connect(self._on_validation_failed)
        controller.capacity_exceeded.connect(self._on_capacity_exceeded)
        controller.image_decode_failed.connect(self._on_image_decode_failed)
        controller.draft_saved.connect(self._on_draft_saved)
        controller.submit_succeeded.connect(self._on_submit_succeeded)
        controller.submit_failed.connect(self._on_submit_failed)

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.controller.request_retreat()

    def _handle_next(self):
        if self.controller.navigator.is_last_step():
            self.controller.submit()
        else:
            self.controller.request_advance()

    def _handle_save_draft(self):
        self.controller.save_draft()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        if 0 <= old_index < len(self.steps):
            self.steps[old_index].on_hide()
        self._show_step(new_index)

    def _show_step(self, index: int):
        self.step_container.setCurrentIndex(index)
        self.steps[index].on_show()
        for i, button in enumerate(self.step_buttons):
            button.setChecked(i == index)
        self._update_progress()
        self._update_navigation_buttons()

    def _scroll_to_top(self):
        self.scroll_area.verticalScrollBar().setValue(0)

    def _update_progress(self):
        """Update progress indicator."""
        navigator = self.controller.navigator
        current = navigator.current_index + 1
        total = navigator.get_step_count()
        self.progress_label.setText(f"Step {current} of {total}")
        self.progress_bar.setValue(int(navigator.get_progress_percentage()))

    def _update_navigation_buttons(self, *_):
        """Update navigation button states."""
        navigator = self.controller.navigator
        busy = self.controller.is_submitting

        self.btn_previous.setVisible(navigator.can_go_previous())
        self.btn_previous.setEnabled(not busy)
        self.btn_save_draft.setEnabled(not busy)
        self.btn_next.setEnabled(not busy)

        if navigator.is_last_step():
            self.btn_next.setText(
                self.get_busy_button_text() if busy else self.get_submit_button_text()
            )
        else:
            self.btn_next.setText("Next")

    def _on_validation_failed(self, error):
        step_index = error.step if error.step is not None else self.controller.current_step
        if 0 <= step_index < len(self.steps):
            self.steps[step_index].show_field_error(error.field or "", error.message)
        Toast.notify(self, self.get_validation_title(error.field or ""), error.message, Toast.ERROR)

    def _on_capacity_exceeded(self, slot: str, cap: int):
        Toast.notify(
            self, "Upload limit exceeded",
            f"You can upload a maximum of {cap} images", Toast.ERROR
        )

    def _on_image_decode_failed(self, slot: str, file_name: str, message: str):
        Toast.notify(self, "Image could not be added", message, Toast.WARNING)

    def _on_draft_saved(self, snapshot: dict):
        Toast.notify(self, "Draft saved", "You can continue editing later", Toast.SUCCESS)
        self.draft_saved.emit(snapshot)

    def _on_submit_succeeded(self, response: dict):
        Toast.notify(self, "Published successfully", "Your listing is now live", Toast.SUCCESS)
        self.wizard_completed.emit(response)

    def _on_submit_failed(self, message: str):
        Toast.notify(self, "Publishing failed", message, Toast.ERROR)
