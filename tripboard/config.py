"""
Configuration constants for tripboard.
Centralized configuration for date conventions, CSV layout, and behavior.
"""

import os
from typing import Dict, List

from dotenv import load_dotenv

load_dotenv()

# Itinerary source (URL or local path)
CSV_SOURCE = os.environ.get("TRIPBOARD_CSV_SOURCE", "mytrip.csv")
FETCH_TIMEOUT_SECONDS = float(os.environ.get("TRIPBOARD_FETCH_TIMEOUT", "30"))

# Date Formats
# Two-digit years always belong to this century
CENTURY_BASE = 2000
DATE_SEPARATOR = "-"
MONTH_ABBREVIATIONS: List[str] = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]
MONTH_NUMBERS: Dict[str, int] = {
    name.lower(): index for index, name in enumerate(MONTH_ABBREVIATIONS, start=1)
}

# CSV Layout
CSV_SEPARATOR = ","
SUMMARY_ROW_MARKER = "Total"
DATE_FROM_HEADER = "date from"
DATE_TO_HEADER = "date to"

# Fixed column positions (date columns are resolved from the header)
COL_DESTINATION = 0
COL_DAYS = 1
COL_TRAVEL_TIME = 4
COL_FLIGHT = 5
COL_STATUS = 6
COL_ACCOMMODATION = 7
COL_COMMENTS = 8
COL_RECOMMENDATIONS = 9
COL_NOTES = 10

# Text joining
CONTINUATION_JOINER = "\n"
RECOMMENDATION_SEPARATOR = ";"

# Logging
LOG_LEVEL = os.environ.get("TRIPBOARD_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("TRIPBOARD_LOG_FILE", "")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
