# -*- coding: utf-8 -*-
"""
Step Navigator - Manages the cursor over an ordered list of wizard steps.

Handles:
- Step progression (next/previous), saturating at both ends
- Direct jumps, clamped into range
- Progress tracking

Validation is not done here; the wizard controller decides whether a move
is allowed before asking the navigator to make it.
"""

from typing import Optional, Sequence

from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Ordered, named steps with a single cursor.

    The cursor is always within [0, step_count - 1]. Out-of-range requests
    are clamped silently rather than rejected, so step indicators can stay
    clickable.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index

    def __init__(self, step_titles: Sequence[str], context: Optional[WizardContext] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the navigator.

        Args:
            step_titles: Step labels, in order
            context: Wizard context kept in sync with the cursor
            parent: Parent object
        """
        super().__init__(parent)
        if not step_titles:
            raise ValueError("A wizard needs at least one step")
        self.step_titles = tuple(step_titles)
        self.context = context
        self._current_index = 0
        if self.context is not None:
            self.context.current_step_index = 0

    @property
    def current_index(self) -> int:
        return self._current_index

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.step_titles)

    def get_step_title(self, index: Optional[int] = None) -> str:
        """Get the title of a step (default: current)."""
        if index is None:
            index = self._current_index
        if 0 <= index < len(self.step_titles):
            return self.step_titles[index]
        return ""

    def can_go_next(self) -> bool:
        """Check if we can navigate to the next step."""
        return self._current_index < len(self.step_titles) - 1

    def can_go_previous(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self._current_index > 0

    def is_last_step(self) -> bool:
        return self._current_index == len(self.step_titles) - 1

    def clamp(self, index: int) -> int:
        """Clamp an index into [0, step_count - 1]."""
        return max(0, min(len(self.step_titles) - 1, index))

    def next_step(self) -> bool:
        """
        Navigate to the next step.

        Returns:
            True if the cursor moved (False at the last step)
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self._current_index})")
            return False
        return self._navigate_to(self._current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self._current_index})")
            return False
        return self._navigate_to(self._current_index - 1)

    def goto_step(self, index: int) -> bool:
        """
        Navigate to a specific step, clamping out-of-range indices.

        Args:
            index: Target step index

        Returns:
            True if the cursor moved
        """
        target = self.clamp(index)
        if target != index:
            logger.debug(f"Step {index} out of range, clamped to {target}")
        if target == self._current_index:
            return False
        return self._navigate_to(target)

    def _navigate_to(self, new_index: int) -> bool:
        """Move the cursor and notify listeners."""
        old_index = self._current_index
        self._current_index = new_index
        if self.context is not None:
            self.context.current_step_index = new_index

        logger.info(
            f"Navigating: Step {old_index} → {new_index} ({self.get_step_title(new_index)})"
        )

        self.step_changed.emit(old_index, new_index)
        return True

    def reset(self):
        """Reset navigator to first step."""
        self.goto_step(0)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.step_titles) <= 1:
            return 100.0
        return (self._current_index / (len(self.step_titles) - 1)) * 100.0
