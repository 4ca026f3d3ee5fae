"""
Trip filtering by calendar day.
"""

from collections import OrderedDict
from datetime import date
from typing import Dict, List, Optional, Sequence

from ..logger import setup_logger
from ..models import TripRecord
from ..parsing.date_codec import decode_date, encode_date
from .date_domain import build_calendar_days

logger = setup_logger(__name__)


def trip_covers(trip: TripRecord, day: date) -> bool:
    """Whether day falls within the trip's range (inclusive, never auto-corrected)."""
    start = decode_date(trip.date_from)
    end = decode_date(trip.date_to)
    if start is None or end is None:
        return False
    return start <= day <= end


def filter_trips_by_date(trips: Sequence[TripRecord], selected_date: Optional[str]) -> List[TripRecord]:
    """
    Get the trips whose date range contains the selected day.

    Args:
        trips: Trip records
        selected_date: Date key like "02-Jan-25", or None

    Returns:
        Matching trips in source order (empty when nothing is
        selected or the selection cannot be decoded)
    """
    if not selected_date or not trips:
        logger.debug(f"No date or trips to filter: {selected_date!r}, {len(trips)} trips")
        return []

    day = decode_date(selected_date)
    if day is None:
        logger.debug(f"Could not parse selected date: {selected_date!r}")
        return []

    return [trip for trip in trips if trip_covers(trip, day)]


def group_trips_by_date(trips: Sequence[TripRecord]) -> Dict[str, List[TripRecord]]:
    """
    Group the whole itinerary by calendar day.

    Returns:
        Ordered mapping of date key to the trips covering that day
    """
    grouped: Dict[str, List[TripRecord]] = OrderedDict()
    for day in build_calendar_days(trips):
        grouped[encode_date(day)] = [trip for trip in trips if trip_covers(trip, day)]
    return grouped
