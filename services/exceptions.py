# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ValidationException(Exception):
    """Exception raised when listing data fails a wizard rule."""

    def __init__(self, message: str, field: str = None, step: int = None,
                 errors: list = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.step = step
        self.errors = errors or []

    def __str__(self):
        if self.field:
            return f"[{self.field}] {self.message}"
        return self.message


class CapacityExceededException(Exception):
    """Exception raised when an image batch would overflow a media slot."""

    def __init__(self, cap: int, slot: str = None, requested: int = 0):
        message = f"You can upload a maximum of {cap} images"
        super().__init__(message)
        self.message = message
        self.cap = cap
        self.slot = slot
        self.requested = requested


class IndexOutOfRangeException(IndexError):
    """Exception raised when a media index does not exist in its slot."""

    def __init__(self, index: int, length: int, slot: str = None):
        message = f"Image index {index} out of range (0-{length - 1})" if length else \
            f"Image index {index} out of range (slot is empty)"
        super().__init__(message)
        self.message = message
        self.index = index
        self.length = length
        self.slot = slot


class ImageDecodeException(Exception):
    """Exception raised when a selected file cannot be read as an image."""

    def __init__(self, message: str, file_name: str = None,
                 original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.file_name = file_name
        self.original_error = original_error


class SubmissionFailedException(Exception):
    """Exception raised when publishing a listing fails."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class WizardBusyException(Exception):
    """Exception raised when a command arrives while a submission is in flight."""

    def __init__(self, operation: str):
        message = f"Cannot {operation} while the listing is being published"
        super().__init__(message)
        self.message = message
        self.operation = operation
