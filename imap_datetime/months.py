"""
Month Table

Canonical RFC 3501 ``date-month`` abbreviations and their month numbers.
The table is built once at import time and cannot be modified.
"""

from types import MappingProxyType
from typing import Optional

# http://tools.ietf.org/html/rfc3501#section-9 (date-month)
MONTH_ABBREVIATIONS = (
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
)

MONTH_NUMBERS = MappingProxyType(
    {name: number for number, name in enumerate(MONTH_ABBREVIATIONS, start=1)}
)


def month_number(name: str) -> Optional[int]:
    """
    Look up the month number for a canonical abbreviation.

    The match is case-exact: 'Jul' is July, 'JUL' and 'jul' are not months.

    Args:
        name: Three-letter month abbreviation

    Returns:
        Month number 1-12, or None if the name is not canonical
    """
    return MONTH_NUMBERS.get(name)


def month_abbreviation(number: int) -> str:
    """Return the canonical abbreviation for month ``number`` (1-12)."""
    if not 1 <= number <= 12:
        raise ValueError(f"Month number out of range: {number}")
    return MONTH_ABBREVIATIONS[number - 1]
