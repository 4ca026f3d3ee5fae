"""Parsing package for CSV ingestion and date handling."""

from .date_codec import decode_date, encode_date, iter_days, normalize_date_key
from .csv_parser import clean_lines, fold_records, parse_itinerary_csv, parse_itinerary_file, resolve_columns
