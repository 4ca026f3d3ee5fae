"""
Services package - Business logic layer.
"""

from .itinerary_service import ItineraryService

__all__ = ['ItineraryService']
