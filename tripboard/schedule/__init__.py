"""Schedule package - calendar-day domain and date filtering for trips."""

from .date_domain import build_calendar_days, build_date_domain, default_selection
from .trip_filter import filter_trips_by_date, group_trips_by_date, trip_covers

__all__ = [
    'build_calendar_days',
    'build_date_domain',
    'default_selection',
    'filter_trips_by_date',
    'group_trips_by_date',
    'trip_covers',
]
