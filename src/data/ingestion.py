"""
Data Ingestion Module - loads the doctor directory from its remote JSON endpoint.

The endpoint serves a single JSON array of doctor records; there are no
request parameters, no pagination and no authentication. Records are turned
into a pandas DataFrame (one row per doctor, input order kept) for the
filter/sort pipeline in ``src.app_logic``.

A failed load raises ``FetchFailure``; callers never receive a partial list.
"""

import logging
from typing import Any, List, Optional

import pandas as pd
import requests

logger = logging.getLogger(__name__)

# Columns every frame carries, even when the payload omits them
DOCTOR_COLUMNS = [
    "id",
    "name",
    "name_initials",
    "photo",
    "specialities",
    "qualification",
    "experience",
    "fees",
    "clinic",
    "video_consult",
    "in_clinic",
]


class FetchFailure(Exception):
    """The doctor list could not be loaded (network error, non-2xx status or bad payload)."""

    def __init__(self, message: str, url: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.url = url
        self.cause = cause


def records_to_frame(records: List[Any]) -> pd.DataFrame:
    """Convert decoded JSON records to a DataFrame with a fresh RangeIndex.

    Entries that are not JSON objects are dropped.
    """
    rows = [record for record in records if isinstance(record, dict)]
    skipped = len(records) - len(rows)
    if skipped:
        logger.warning(f"Skipped {skipped} doctor entries that were not JSON objects")

    df = pd.DataFrame.from_records(rows) if rows else pd.DataFrame()
    for col in DOCTOR_COLUMNS:
        if col not in df.columns:
            df[col] = None
    # Keep list/dict cells and booleans as-is; object dtype avoids NaN coercion of None
    return df.astype(object).reset_index(drop=True)


def fetch_doctors(url: Optional[str] = None, timeout: Optional[float] = None) -> pd.DataFrame:
    """Fetch the doctor directory and return it as a DataFrame.

    Args:
        url: Endpoint override; defaults to the configured endpoint
        timeout: Request timeout in seconds; defaults to the configured value

    Returns:
        pd.DataFrame: One row per doctor, in the order served

    Raises:
        FetchFailure: On transport errors, non-2xx responses, invalid JSON,
            or a payload that is not a JSON array
    """
    if url is None or timeout is None:
        from src.utils.config import get_api_config

        config = get_api_config("doctors")
        url = url or config["endpoint_url"]
        timeout = timeout if timeout is not None else config["request_timeout"]

    logger.info(f"Fetching doctor directory from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Doctor directory request failed: {type(e).__name__}: {e}")
        raise FetchFailure("Failed to fetch doctor data", url=url, cause=e) from e

    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Doctor directory response is not valid JSON: {e}")
        raise FetchFailure("Doctor data is not valid JSON", url=url, cause=e) from e

    if not isinstance(payload, list):
        logger.error(f"Doctor directory payload is {type(payload).__name__}, expected a list")
        raise FetchFailure("Doctor data is not a list of records", url=url)

    df = records_to_frame(payload)
    logger.info(f"Loaded {len(df)} doctors")
    return df
