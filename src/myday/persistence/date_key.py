"""
Conversion between (year, month) pairs and ``YYYYMM`` storage keys.
"""

from datetime import datetime

INVALID_DATE_KEY = (0, 0)


def format_date_key(year: int, month: int) -> str:
    """Format a month as ``YYYYMM``, e.g. (2025, 3) -> "202503"."""
    return f"{year:04d}{month:02d}"


def date_key_for(moment: datetime) -> str:
    return format_date_key(moment.year, moment.month)


def parse_date_key(key: str) -> tuple[int, int]:
    """Parse a ``YYYYMM`` key.

    Returns ``(0, 0)`` when the key is not exactly six digits. Callers must
    check for a zero year.
    """
    if len(key) != 6 or not key.isascii() or not key.isdigit():
        return INVALID_DATE_KEY
    return int(key[:4]), int(key[4:])


def is_date_key(key: str) -> bool:
    """True for six-digit keys whose month part is 1..12."""
    year, month = parse_date_key(key)
    return year != 0 and 1 <= month <= 12
