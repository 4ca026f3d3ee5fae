"""
Tabular export of the itinerary.
Builds pandas DataFrames for presentation layers that render tables.
"""

from typing import Sequence

import pandas as pd

from .models import TripRecord
from .parsing.date_codec import decode_date, encode_date
from .schedule import build_calendar_days, trip_covers

TRIP_COLUMNS = [
    'destination', 'days', 'date_from', 'date_to', 'travel_time', 'flight',
    'status', 'accommodation', 'comments', 'recommendations', 'notes',
]


def trips_to_dataframe(trips: Sequence[TripRecord]) -> pd.DataFrame:
    """
    Convert trips to a DataFrame, one row per trip in source order.

    Adds `start` and `end` date columns (NaT when the text cannot be decoded).

    Args:
        trips: Trip records

    Returns:
        DataFrame with the trip fields plus decoded range endpoints
    """
    df = pd.DataFrame([trip.to_dict() for trip in trips], columns=TRIP_COLUMNS)
    df['start'] = pd.to_datetime(df['date_from'].map(decode_date))
    df['end'] = pd.to_datetime(df['date_to'].map(decode_date))
    return df


def itinerary_by_date_frame(trips: Sequence[TripRecord]) -> pd.DataFrame:
    """
    Expand the itinerary into one row per (day, trip).

    Returns:
        DataFrame with `date_key`, `date`, `destination`, `status` and
        `accommodation` columns, ordered by day then source order
    """
    rows = []
    for day in build_calendar_days(trips):
        for trip in trips:
            if trip_covers(trip, day):
                rows.append({
                    'date_key': encode_date(day),
                    'date': pd.Timestamp(day),
                    'destination': trip.destination,
                    'status': trip.status,
                    'accommodation': trip.accommodation,
                })
    return pd.DataFrame(rows, columns=['date_key', 'date', 'destination', 'status', 'accommodation'])
