"""
Parse diagnostics and results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .trip import TripRecord


class DiagnosticKind(Enum):
    """Reasons a piece of input was skipped or dropped."""
    EMPTY_DOCUMENT = "empty_document"
    SUMMARY_ROW = "summary_row"
    DUPLICATE_LINE = "duplicate_line"
    MISSING_COLUMN = "missing_column"
    ORPHAN_CONTINUATION = "orphan_continuation"
    INCOMPLETE_RECORD = "incomplete_record"


@dataclass(frozen=True)
class ParseDiagnostic:
    """A note about input that did not make it into the itinerary."""
    kind: DiagnosticKind
    message: str
    line_number: Optional[int] = None  # 1-based, None for whole-document issues


@dataclass
class ParseResult:
    """Trips parsed from a CSV document plus everything that was skipped."""
    trips: List[TripRecord] = field(default_factory=list)
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        """Number of records dropped for missing required fields."""
        return sum(1 for d in self.diagnostics if d.kind == DiagnosticKind.INCOMPLETE_RECORD)

    def diagnostics_of(self, kind: DiagnosticKind) -> List[ParseDiagnostic]:
        """Diagnostics of a single kind, in input order."""
        return [d for d in self.diagnostics if d.kind == kind]
