# -*- coding: utf-8 -*-
"""
Catalog Listing Service Layer
"""

# Lazy imports keep PyQt out of modules that only need the encoder
__all__ = [
    "MediaIntake",
    "MediaSlot",
    "SubmissionService",
    "encode_image",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in ("MediaIntake", "MediaSlot"):
        from . import media_intake
        return getattr(media_intake, name)
    elif name == "SubmissionService":
        from .submission_service import SubmissionService
        return SubmissionService
    elif name == "encode_image":
        from .image_encoder import encode_image
        return encode_image
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
