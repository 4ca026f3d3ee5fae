"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

HEADER = (
    "Destination,Days,Date From,Date To,Travel Time,Flight,Status,"
    "Accommodation,Comments,Recommendations,Notes"
)


@pytest.fixture
def csv_header():
    """Header row of the itinerary export."""
    return HEADER


@pytest.fixture
def sample_csv():
    """A realistic export with continuation, summary and duplicate rows."""
    return "\n".join([
        HEADER,
        "Paris,3,01-Jan-25,03-Jan-25,2h,AF123,Booked,Hotel Lumiere,Eiffel at night,Louvre; Orsay,Bring adapter",
        ",,,,,,,,Book dinner,Montmartre",
        ",,,,,,,,,Le Marais",
        "Lyon,2,03-Jan-25,04-Jan-25,2h train,,Pending,,,,",
        "Lyon,2,03-Jan-25,04-Jan-25,2h train,,Pending,,,,",
        "",
        "Nowhere,1,,05-Jan-25,,,,,,,",
        "Total,6,,,,,,,,,",
    ])


@pytest.fixture
def overlapping_trips():
    """Two trips sharing 02-Jan-25."""
    from tripboard.models import TripRecord

    return [
        TripRecord(destination="Paris", days=2, date_from="01-Jan-25", date_to="02-Jan-25"),
        TripRecord(destination="Lyon", days=2, date_from="02-Jan-25", date_to="03-Jan-25"),
    ]


@pytest.fixture
def sample_trip():
    """Create a sample trip for testing."""
    from tripboard.models import TripRecord

    return TripRecord(
        destination="Rome",
        days=4,
        date_from="10-Feb-25",
        date_to="13-Feb-25",
        travel_time="2h 10m",
        flight="AZ 321",
        status="Booked",
        accommodation="Trastevere flat",
        comments="Arrive late",
        recommendations="Pantheon; ; Borghese Gallery ",
        notes=None,
    )
