# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, Union


def parse_decimal(value: Any) -> Decimal:
    """
    Parse a user-entered amount, falling back to zero.

    Empty strings, None and unparsable text all become Decimal("0"),
    matching how the price inputs treat a cleared field.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return Decimal("0")

    if not result.is_finite():
        return Decimal("0")
    return result


def parse_int(value: Any) -> int:
    """Parse a user-entered whole number, falling back to zero."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, OverflowError):
        return 0


_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off", "")


def parse_bool(value: Any) -> bool:
    """
    Parse a flag given as a bool, a number or text such as "yes"/"false".

    Raises:
        ValueError: for text that is not a recognised flag
    """
    if value is None:
        return False
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f"Not a yes/no value: {value!r}")
    return bool(value)


def parse_tags(value: Union[str, List[str], None]) -> List[str]:
    """
    Normalize tags given as a list or a comma separated string.

    Entries are trimmed and empty entries are dropped; order is kept.
    """
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(tag).strip() for tag in value if str(tag).strip()]


def format_price(value: Optional[Union[Decimal, int, float]]) -> str:
    """Format an amount with two decimals for display."""
    if value is None:
        return ""
    return f"{Decimal(str(value)):.2f}"


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """
    Truncate text to maximum length with suffix.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to add when truncated

    Returns:
        Truncated text
    """
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length - len(suffix)] + suffix
