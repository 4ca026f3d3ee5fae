"""
Date domain builder.
Expands trip date ranges into the ordered set of selectable days.
"""

from datetime import date
from typing import Iterable, List, Optional, Set

from ..logger import setup_logger
from ..models import TripRecord
from ..parsing.date_codec import decode_date, encode_date, iter_days

logger = setup_logger(__name__)


def build_calendar_days(trips: Iterable[TripRecord]) -> List[date]:
    """
    Collect every day covered by any trip.

    Trips with an undecodable endpoint contribute no days. Inverted ranges
    contribute none either.

    Args:
        trips: Trip records in any order

    Returns:
        Unique days in chronological order
    """
    days: Set[date] = set()
    for trip in trips:
        start = decode_date(trip.date_from)
        end = decode_date(trip.date_to)
        if start is None or end is None:
            logger.debug(f"Invalid date range for trip: {trip.destination}")
            continue
        days.update(iter_days(start, end))
    return sorted(days)


def build_date_domain(trips: Iterable[TripRecord]) -> List[str]:
    """Selectable date keys ("DD-Mon-YY") in chronological order."""
    return [encode_date(day) for day in build_calendar_days(trips)]


def default_selection(date_keys: List[str]) -> Optional[str]:
    """The initial selection: the earliest date, or None when there are no dates."""
    return date_keys[0] if date_keys else None
