"""
Models package - Data models and type definitions.
"""

from .trip import TripRecord
from .diagnostics import DiagnosticKind, ParseDiagnostic, ParseResult

__all__ = ['TripRecord', 'DiagnosticKind', 'ParseDiagnostic', 'ParseResult']
