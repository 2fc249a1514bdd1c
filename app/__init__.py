# -*- coding: utf-8 -*-
"""
Catalog Listing Wizard Application Core Module
"""

from .config import Config

__all__ = ["Config"]
