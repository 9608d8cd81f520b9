"""Data loading package for the Doctor Directory."""

from .ingestion import DOCTOR_COLUMNS, FetchFailure, fetch_doctors, records_to_frame

__all__ = [
    "DOCTOR_COLUMNS",
    "FetchFailure",
    "fetch_doctors",
    "records_to_frame",
]
