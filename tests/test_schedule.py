"""
Unit tests for the date domain and trip filtering
"""
import pytest
from datetime import date

from tripboard.models import TripRecord
from tripboard.schedule import (
    build_calendar_days,
    build_date_domain,
    default_selection,
    filter_trips_by_date,
    group_trips_by_date,
    trip_covers,
)


@pytest.mark.unit
class TestDateDomain:
    """Test build_date_domain and friends."""

    def test_overlapping_ranges_collapse(self, overlapping_trips):
        assert build_date_domain(overlapping_trips) == ["01-Jan-25", "02-Jan-25", "03-Jan-25"]

    def test_independent_of_input_order(self, overlapping_trips):
        assert build_date_domain(list(reversed(overlapping_trips))) == build_date_domain(overlapping_trips)

    def test_chronological_not_textual_order(self):
        trips = [
            TripRecord(destination="B", date_from="01-Feb-25", date_to="01-Feb-25"),
            TripRecord(destination="A", date_from="15-Jan-25", date_to="15-Jan-25"),
            TripRecord(destination="C", date_from="30-Dec-24", date_to="30-Dec-24"),
        ]
        assert build_date_domain(trips) == ["30-Dec-24", "15-Jan-25", "01-Feb-25"]

    def test_dedupes_by_calendar_value(self):
        """Differently written texts for the same day yield one key."""
        trips = [
            TripRecord(destination="A", date_from="5-jan-25", date_to="05-JAN-25"),
            TripRecord(destination="B", date_from="05-Jan-25", date_to="05-Jan-25"),
        ]
        assert build_date_domain(trips) == ["05-Jan-25"]

    def test_undecodable_trip_contributes_nothing(self):
        trips = [
            TripRecord(destination="A", date_from="01-Jan-25", date_to="02-Jan-25"),
            TripRecord(destination="B", date_from="soon", date_to="05-Jan-25"),
        ]
        assert build_date_domain(trips) == ["01-Jan-25", "02-Jan-25"]

    def test_inverted_range_contributes_nothing(self):
        trips = [TripRecord(destination="A", date_from="03-Jan-25", date_to="01-Jan-25")]
        assert build_calendar_days(trips) == []

    def test_spans_month_boundary(self):
        trips = [TripRecord(destination="A", date_from="27-Feb-24", date_to="01-Mar-24")]
        assert build_calendar_days(trips) == [
            date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1),
        ]

    def test_default_selection(self):
        assert default_selection(["01-Jan-25", "02-Jan-25"]) == "01-Jan-25"
        assert default_selection([]) is None


@pytest.mark.unit
class TestTripDateFilter:
    """Test filter_trips_by_date."""

    def test_shared_day_returns_both_in_order(self, overlapping_trips):
        result = filter_trips_by_date(overlapping_trips, "02-Jan-25")
        assert [t.destination for t in result] == ["Paris", "Lyon"]

    def test_edge_days_are_inclusive(self, overlapping_trips):
        assert [t.destination for t in filter_trips_by_date(overlapping_trips, "01-Jan-25")] == ["Paris"]
        assert [t.destination for t in filter_trips_by_date(overlapping_trips, "03-Jan-25")] == ["Lyon"]

    def test_non_canonical_selection(self, overlapping_trips):
        assert len(filter_trips_by_date(overlapping_trips, "2-JAN-25")) == 2

    @pytest.mark.parametrize("selected", [None, "", "04-Jan-25", "31-Dec-24", "garbage"])
    def test_no_match(self, overlapping_trips, selected):
        assert filter_trips_by_date(overlapping_trips, selected) == []

    def test_empty_trips(self):
        assert filter_trips_by_date([], "01-Jan-25") == []

    def test_inverted_range_never_matches(self):
        trip = TripRecord(destination="Back", date_from="05-Jan-25", date_to="01-Jan-25")
        for key in ("01-Jan-25", "03-Jan-25", "05-Jan-25"):
            assert filter_trips_by_date([trip], key) == []

    def test_undecodable_trip_is_excluded(self, overlapping_trips):
        trips = overlapping_trips + [TripRecord(destination="X", date_from="02-Jan-25", date_to="??")]
        assert [t.destination for t in filter_trips_by_date(trips, "02-Jan-25")] == ["Paris", "Lyon"]

    def test_trip_covers(self, overlapping_trips):
        paris = overlapping_trips[0]
        assert trip_covers(paris, date(2025, 1, 1))
        assert not trip_covers(paris, date(2025, 1, 3))


@pytest.mark.unit
class TestGroupTripsByDate:
    """Test grouping the whole itinerary by day."""

    def test_grouping(self, overlapping_trips):
        grouped = group_trips_by_date(overlapping_trips)

        assert list(grouped) == ["01-Jan-25", "02-Jan-25", "03-Jan-25"]
        assert [t.destination for t in grouped["02-Jan-25"]] == ["Paris", "Lyon"]
        assert [t.destination for t in grouped["03-Jan-25"]] == ["Lyon"]

    def test_empty(self):
        assert group_trips_by_date([]) == {}
