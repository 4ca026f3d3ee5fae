"""
Date codec for "DD-Mon-YY" itinerary dates.
Converts between compact date text and calendar dates under a fixed century rule.
"""

import re
from datetime import date, timedelta
from typing import Iterator, Optional

from ..config import CENTURY_BASE, DATE_SEPARATOR, MONTH_ABBREVIATIONS, MONTH_NUMBERS
from ..logger import setup_logger

logger = setup_logger(__name__)

_DAY_RE = re.compile(r"^\d{1,2}$")
_YEAR_RE = re.compile(r"^\d{2}$")


def decode_date(text) -> Optional[date]:
    """
    Parse a "DD-Mon-YY" date string.

    The day is not checked against the month length: it is applied as an
    offset from the first of the month, so "31-Feb-24" rolls over to
    2024-03-02 and "00-Jan-25" to 2024-12-31.

    Args:
        text: Date string like "05-Jan-25"

    Returns:
        The decoded date, or None if the text is not a valid date string
    """
    if not isinstance(text, str) or not text.strip():
        logger.debug(f"Invalid date string: {text!r}")
        return None

    parts = text.strip().split(DATE_SEPARATOR)
    if len(parts) != 3:
        logger.debug(f"Invalid date format: {text!r}")
        return None

    day_str, month_str, year_str = (part.strip() for part in parts)
    month = MONTH_NUMBERS.get(month_str.lower())
    if month is None or not _DAY_RE.match(day_str) or not _YEAR_RE.match(year_str):
        logger.debug(f"Invalid date format: {text!r}")
        return None

    first_of_month = date(CENTURY_BASE + int(year_str), month, 1)
    return first_of_month + timedelta(days=int(day_str) - 1)


def encode_date(day: date) -> str:
    """
    Format a date as canonical "DD-Mon-YY" text.

    Args:
        day: Calendar date

    Returns:
        Date string like "05-Jan-25"
    """
    month = MONTH_ABBREVIATIONS[day.month - 1]
    return f"{day.day:02d}{DATE_SEPARATOR}{month}{DATE_SEPARATOR}{day.year % 100:02d}"


def normalize_date_key(text) -> Optional[str]:
    """Re-canonicalize a date string, or None if it cannot be decoded."""
    day = decode_date(text)
    return encode_date(day) if day is not None else None


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start through end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
