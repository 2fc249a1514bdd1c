# -*- coding: utf-8 -*-
"""
Catalog Listing UI Components
"""

from .toast import Toast
from .image_uploader import ImageUploader

__all__ = [
    "Toast",
    "ImageUploader",
]
