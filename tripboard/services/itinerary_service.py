"""
Itinerary service - the single seam between ingestion and presentation.
Holds the trips loaded at startup and answers date selection queries.
"""

from pathlib import Path
from typing import List, Optional

import httpx

from ..config import CSV_SOURCE
from ..logger import setup_logger, log_itinerary_stats
from ..models import ParseDiagnostic, TripRecord
from ..parsing import parse_itinerary_csv
from ..schedule import build_date_domain, default_selection, filter_trips_by_date
from ..sources import ItinerarySourceError, fetch_csv_text

logger = setup_logger(__name__)


class ItineraryService:
    """
    Service layer for the itinerary.

    Trips and dates are rebuilt from scratch on every load; selecting a
    date only recomputes the filtered view.
    """

    def __init__(self, source: str | Path = CSV_SOURCE):
        self.source = source
        self._trips: List[TripRecord] = []
        self._dates: List[str] = []
        self._diagnostics: List[ParseDiagnostic] = []
        self.selected_date: Optional[str] = None
        self.last_error: Optional[str] = None

    @property
    def trips(self) -> List[TripRecord]:
        """All loaded trips in source order."""
        return list(self._trips)

    @property
    def available_dates(self) -> List[str]:
        """Selectable date keys in chronological order."""
        return list(self._dates)

    @property
    def diagnostics(self) -> List[ParseDiagnostic]:
        """Diagnostics from the last parse."""
        return list(self._diagnostics)

    @property
    def is_loaded(self) -> bool:
        """Whether a load succeeded and produced trips."""
        return bool(self._trips)

    async def load(
        self,
        source: Optional[str | Path] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> bool:
        """
        Fetch the source once and rebuild the itinerary.

        A failed fetch is logged and recorded in last_error; the itinerary
        is left empty and nothing is retried.

        Args:
            source: URL or path to load from (defaults to the configured source)
            client: Optional HTTP client to use for remote sources

        Returns:
            True if the source was retrieved and parsed
        """
        if source is not None:
            self.source = source

        self._reset()
        try:
            csv_text = await fetch_csv_text(self.source, client=client)
        except ItinerarySourceError as e:
            logger.error(f"Error loading trip data: {e}")
            self.last_error = str(e)
            return False

        self.load_text(csv_text)
        return True

    def load_text(self, csv_text: str) -> List[TripRecord]:
        """
        Parse CSV text, build the date domain, and select the earliest date.

        Returns:
            The loaded trips
        """
        self._reset()
        result = parse_itinerary_csv(csv_text)
        self._trips = result.trips
        self._diagnostics = result.diagnostics
        self._dates = build_date_domain(self._trips)
        self.selected_date = default_selection(self._dates)

        log_itinerary_stats(self._trips, self._dates, logger)
        return self.trips

    def select(self, date_key: Optional[str]) -> List[TripRecord]:
        """Select a date and return the trips covering it."""
        self.selected_date = date_key
        return self.selected_trips

    @property
    def selected_trips(self) -> List[TripRecord]:
        """Trips covering the selected date."""
        return self.trips_for_date(self.selected_date)

    def trips_for_date(self, date_key: Optional[str]) -> List[TripRecord]:
        """Trips covering the given date, in source order."""
        return filter_trips_by_date(self._trips, date_key)

    def _reset(self):
        self._trips = []
        self._dates = []
        self._diagnostics = []
        self.selected_date = None
        self.last_error = None
