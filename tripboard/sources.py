"""
Itinerary source retrieval.
Fetches the CSV document once, from an HTTP(S) URL or a local path.
"""

import asyncio
from pathlib import Path
from typing import Optional

import httpx

from .config import FETCH_TIMEOUT_SECONDS
from .logger import setup_logger

logger = setup_logger(__name__)


class ItinerarySourceError(Exception):
    """Raised when the itinerary CSV cannot be retrieved."""


def is_remote(source: str) -> bool:
    """Whether the source is an HTTP(S) URL."""
    return source.lower().startswith(("http://", "https://"))


async def fetch_csv_text(
    source: str | Path,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = FETCH_TIMEOUT_SECONDS,
) -> str:
    """
    Retrieve the itinerary CSV as text.

    Args:
        source: HTTP(S) URL or local file path
        client: Optional client to reuse (a new one is created otherwise)
        timeout: Request timeout in seconds for a newly created client

    Returns:
        The CSV document

    Raises:
        ItinerarySourceError: If the resource cannot be read
    """
    source = str(source)
    if not is_remote(source):
        return await asyncio.to_thread(read_local_csv, source)

    logger.debug(f"Fetching itinerary CSV: {source}")
    try:
        if client is not None:
            response = await client.get(source)
        else:
            async with httpx.AsyncClient(timeout=timeout) as new_client:
                response = await new_client.get(source)
    except httpx.TimeoutException as e:
        logger.error(f"Itinerary fetch timed out: {source}")
        raise ItinerarySourceError(f"Request timed out: {source}") from e
    except httpx.HTTPError as e:
        logger.error(f"Itinerary fetch failed: {e}")
        raise ItinerarySourceError(f"Could not reach {source}: {e}") from e

    if not response.is_success:
        logger.error(f"Itinerary fetch returned {response.status_code}: {source}")
        raise ItinerarySourceError(f"HTTP {response.status_code} for {source}")

    return response.text


def read_local_csv(path: str | Path) -> str:
    """Read a local CSV file, tolerating a UTF-8 byte order mark."""
    path = Path(path)
    logger.debug(f"Reading itinerary CSV: {path}")
    try:
        return path.read_text(encoding="utf-8-sig")
    except OSError as e:
        logger.error(f"Could not read itinerary CSV {path}: {e}")
        raise ItinerarySourceError(f"Could not read {path}: {e}") from e
