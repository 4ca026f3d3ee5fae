"""
Trip data model.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..config import RECOMMENDATION_SEPARATOR


@dataclass(frozen=True)
class TripRecord:
    """
    Represents a single itinerary entry.

    Attributes:
        destination: Place name, the grouping/display key
        days: Duration in days (0 when the export left it blank)
        date_from: First day of the stay, "DD-Mon-YY"
        date_to: Last day of the stay, "DD-Mon-YY"
        travel_time: Optional travel time description
        flight: Optional flight details
        status: Optional booking status
        accommodation: Optional accommodation details
        comments: Optional comments, newline-joined across continuation rows
        recommendations: Optional recommendations, newline-joined across continuation rows
        notes: Optional additional notes
    """
    destination: str
    days: int = 0
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    travel_time: Optional[str] = None
    flight: Optional[str] = None
    status: Optional[str] = None
    accommodation: Optional[str] = None
    comments: Optional[str] = None
    recommendations: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """Whether the record has a destination and both range endpoints."""
        return bool(self.destination and self.date_from and self.date_to)

    @property
    def recommendation_items(self) -> List[str]:
        """Recommendations split into individual items."""
        if not self.recommendations:
            return []
        items = (item.strip() for item in self.recommendations.split(RECOMMENDATION_SEPARATOR))
        return [item for item in items if item]

    def to_dict(self) -> dict:
        """Convert trip to dictionary."""
        return {
            'destination': self.destination,
            'days': self.days,
            'date_from': self.date_from,
            'date_to': self.date_to,
            'travel_time': self.travel_time,
            'flight': self.flight,
            'status': self.status,
            'accommodation': self.accommodation,
            'comments': self.comments,
            'recommendations': self.recommendations,
            'notes': self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TripRecord':
        """Create TripRecord from dictionary."""
        return cls(
            destination=data['destination'],
            days=data.get('days', 0),
            date_from=data.get('date_from'),
            date_to=data.get('date_to'),
            travel_time=data.get('travel_time'),
            flight=data.get('flight'),
            status=data.get('status'),
            accommodation=data.get('accommodation'),
            comments=data.get('comments'),
            recommendations=data.get('recommendations'),
            notes=data.get('notes'),
        )
