"""
CSV parsing module for itinerary exports.
Handles line cleanup, header resolution, and multi-row trip records.
"""

import re
from dataclasses import replace
from functools import partial, reduce
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence, Tuple

from ..config import (
    COL_ACCOMMODATION,
    COL_COMMENTS,
    COL_DAYS,
    COL_DESTINATION,
    COL_FLIGHT,
    COL_NOTES,
    COL_RECOMMENDATIONS,
    COL_STATUS,
    COL_TRAVEL_TIME,
    CONTINUATION_JOINER,
    CSV_SEPARATOR,
    DATE_FROM_HEADER,
    DATE_TO_HEADER,
    SUMMARY_ROW_MARKER,
)
from ..logger import setup_logger
from ..models import DiagnosticKind, ParseDiagnostic, ParseResult, TripRecord
from ..sources import read_local_csv

logger = setup_logger(__name__)

_LEADING_INT_RE = re.compile(r"^\d+")

NumberedLine = Tuple[int, str]


class ColumnLayout(NamedTuple):
    """Positions of the name-resolved date columns (None when absent)."""
    date_from: Optional[int]
    date_to: Optional[int]


class _FoldState(NamedTuple):
    """Parser state between lines: closed records and the open one."""
    closed: Tuple[Tuple[int, TripRecord], ...]
    current: Optional[Tuple[int, TripRecord]]
    diagnostics: Tuple[ParseDiagnostic, ...]


def split_values(line: str) -> List[str]:
    """Split a CSV line on commas and trim every value."""
    return [value.strip() for value in line.split(CSV_SEPARATOR)]


def clean_lines(csv_text: str) -> Tuple[List[NumberedLine], List[ParseDiagnostic]]:
    """
    Drop blank lines, summary rows, and exact duplicate lines.

    Args:
        csv_text: Raw CSV document

    Returns:
        Tuple of (kept lines with 1-based line numbers, diagnostics)
    """
    kept: List[NumberedLine] = []
    diagnostics: List[ParseDiagnostic] = []
    seen = set()

    for line_number, line in enumerate(csv_text.splitlines(), start=1):
        if not line.strip():
            continue
        if line.lstrip().startswith(SUMMARY_ROW_MARKER):
            diagnostics.append(ParseDiagnostic(
                DiagnosticKind.SUMMARY_ROW, "Skipped summary row", line_number))
            continue
        if line in seen:
            diagnostics.append(ParseDiagnostic(
                DiagnosticKind.DUPLICATE_LINE, "Skipped duplicate line", line_number))
            continue
        seen.add(line)
        kept.append((line_number, line))

    return kept, diagnostics


def resolve_columns(header_line: str) -> ColumnLayout:
    """Locate the date columns by case-insensitive header name."""
    headers = [h.lower() for h in split_values(header_line)]

    def _find(name: str) -> Optional[int]:
        return headers.index(name) if name in headers else None

    return ColumnLayout(_find(DATE_FROM_HEADER), _find(DATE_TO_HEADER))


def parse_days(value: str) -> int:
    """Parse the leading integer of a days cell, 0 if there is none."""
    match = _LEADING_INT_RE.match(value)
    return int(match.group()) if match else 0


def _cell(values: Sequence[str], index: Optional[int]) -> str:
    if index is None or index >= len(values):
        return ""
    return values[index]


def _optional(values: Sequence[str], index: Optional[int]) -> Optional[str]:
    return _cell(values, index) or None


def _append_text(existing: Optional[str], addition: str) -> Optional[str]:
    if not addition:
        return existing
    return f"{existing}{CONTINUATION_JOINER}{addition}" if existing else addition


def _open_record(values: Sequence[str], columns: ColumnLayout) -> TripRecord:
    return TripRecord(
        destination=_cell(values, COL_DESTINATION),
        days=parse_days(_cell(values, COL_DAYS)),
        date_from=_optional(values, columns.date_from),
        date_to=_optional(values, columns.date_to),
        travel_time=_optional(values, COL_TRAVEL_TIME),
        flight=_optional(values, COL_FLIGHT),
        status=_optional(values, COL_STATUS),
        accommodation=_optional(values, COL_ACCOMMODATION),
        comments=_optional(values, COL_COMMENTS),
        recommendations=_optional(values, COL_RECOMMENDATIONS),
        notes=_optional(values, COL_NOTES),
    )


def _continue_record(record: TripRecord, values: Sequence[str]) -> TripRecord:
    return replace(
        record,
        comments=_append_text(record.comments, _cell(values, COL_COMMENTS)),
        recommendations=_append_text(record.recommendations, _cell(values, COL_RECOMMENDATIONS)),
    )


def _fold_line(columns: ColumnLayout, state: _FoldState, line: NumberedLine) -> _FoldState:
    """Apply one data line to the parser state."""
    line_number, text = line
    values = split_values(text)

    if _cell(values, COL_DESTINATION):
        closed = state.closed + (state.current,) if state.current else state.closed
        return _FoldState(closed, (line_number, _open_record(values, columns)), state.diagnostics)

    if state.current is None:
        diagnostic = ParseDiagnostic(
            DiagnosticKind.ORPHAN_CONTINUATION,
            "Continuation row before any trip",
            line_number,
        )
        return state._replace(diagnostics=state.diagnostics + (diagnostic,))

    start_line, record = state.current
    return state._replace(current=(start_line, _continue_record(record, values)))


def fold_records(
    lines: Sequence[NumberedLine],
    columns: ColumnLayout,
) -> Tuple[List[Tuple[int, TripRecord]], List[ParseDiagnostic]]:
    """
    Fold data lines into trip records.

    A line with a destination opens a new record; a line without one
    extends the open record's comments and recommendations.

    Args:
        lines: Data lines (header excluded) with their line numbers
        columns: Resolved date column positions

    Returns:
        Tuple of (records with their starting line numbers, diagnostics)
    """
    initial = _FoldState(closed=(), current=None, diagnostics=())
    final = reduce(partial(_fold_line, columns), lines, initial)
    closed = final.closed + (final.current,) if final.current else final.closed
    return list(closed), list(final.diagnostics)


def parse_itinerary_csv(csv_text: str) -> ParseResult:
    """
    Parse an itinerary CSV export into trip records.

    Args:
        csv_text: Full CSV document (header row plus data rows)

    Returns:
        ParseResult with complete trips in row order and diagnostics for
        everything that was skipped or dropped
    """
    lines, diagnostics = clean_lines(csv_text or "")
    if not lines:
        logger.warning("Itinerary CSV is empty")
        diagnostics.append(ParseDiagnostic(DiagnosticKind.EMPTY_DOCUMENT, "No header row found"))
        return ParseResult(trips=[], diagnostics=diagnostics)

    header_number, header = lines[0]
    columns = resolve_columns(header)
    for name, index in ((DATE_FROM_HEADER, columns.date_from), (DATE_TO_HEADER, columns.date_to)):
        if index is None:
            logger.warning(f"Itinerary CSV has no '{name}' column")
            diagnostics.append(ParseDiagnostic(
                DiagnosticKind.MISSING_COLUMN, f"Missing column: {name}", header_number))

    records, fold_diagnostics = fold_records(lines[1:], columns)
    diagnostics.extend(fold_diagnostics)

    trips: List[TripRecord] = []
    for line_number, record in records:
        if record.is_complete:
            trips.append(record)
        else:
            logger.debug(f"Filtered out invalid trip at line {line_number}: {record}")
            diagnostics.append(ParseDiagnostic(
                DiagnosticKind.INCOMPLETE_RECORD,
                f"Trip '{record.destination}' is missing a date",
                line_number,
            ))

    result = ParseResult(trips=trips, diagnostics=sorted(diagnostics, key=_diagnostic_order))
    if result.dropped_count:
        logger.warning(f"Dropped {result.dropped_count} incomplete trips")
    logger.info(f"Parsed {len(trips)} trips from {len(lines) - 1} data lines")
    return result


def _diagnostic_order(diagnostic: ParseDiagnostic) -> int:
    return diagnostic.line_number if diagnostic.line_number is not None else 0


def parse_itinerary_file(filepath: str | Path) -> ParseResult:
    """
    Parse an itinerary CSV file from disk.

    Raises:
        ItinerarySourceError: If the file cannot be read
    """
    logger.info(f"Parsing CSV file: {Path(filepath).name}")
    return parse_itinerary_csv(read_local_csv(filepath))
