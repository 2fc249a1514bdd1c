# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for controllers in the listing wizard.

Provides common functionality and patterns for controllers.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None,
             error: Exception = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [], error=error)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - Error bookkeeping
    - Logging
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    data_changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    def _set_loading(self, loading: bool):
        """Set loading state and emit signal."""
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        """Set error message."""
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _emit_started(self, operation: str):
        """Emit operation started signal."""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        """Emit operation completed signal."""
        self.operation_completed.emit(operation, success)
        self._set_loading(False)
        if success:
            self.data_changed.emit()

    def _emit_error(self, operation: str, error: str):
        """Emit operation error signal."""
        self._set_error(error)
        self.operation_error.emit(operation, error)
        self._set_loading(False)

