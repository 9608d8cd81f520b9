import logging

import numpy as np
import pandas as pd

from src.data.ingestion import fetch_doctors
from src.utils.cleaning import doctor_specialty_names, experience_years, fee_amount
from src.utils.query_state import (
    CONSULTATION_TYPES,
    SORT_BY_EXPERIENCE,
    SORT_BY_FEES,
    FilterState,
)

__all__ = [
    "load_directory_data",
    "filter_doctors_by_search_term",
    "filter_doctors_by_consultation_type",
    "get_unique_specialties",
    "filter_doctors_by_specialty",
    "filter_specialty_options",
    "sort_doctors",
    "apply_filters",
    "suggest_doctors",
]

logger = logging.getLogger(__name__)


def load_directory_data() -> pd.DataFrame:
    """Load the doctor directory for the application.

    Returns:
        pd.DataFrame: One row per doctor, in the order the endpoint serves them

    Raises:
        FetchFailure: If the endpoint cannot be read (handled by the controller)
    """
    return fetch_doctors()


def _name_contains(df: pd.DataFrame, term: str) -> pd.Series:
    names = df["name"].apply(lambda v: v if isinstance(v, str) else "")
    return names.str.lower().str.contains(term.lower(), regex=False)


def filter_doctors_by_search_term(df: pd.DataFrame, search_term: str) -> pd.DataFrame:
    """Keep doctors whose name contains ``search_term`` (case-insensitive).

    An empty term keeps every doctor.
    """
    if df is None or df.empty or not search_term:
        return df
    if "name" not in df.columns:
        return df.iloc[0:0].copy()
    return df[_name_contains(df, search_term)].copy()


def filter_doctors_by_consultation_type(df: pd.DataFrame, consultation_type: str) -> pd.DataFrame:
    """Keep doctors offering the selected consultation mode.

    ``"video_consult"`` and ``"in_clinic"`` select on the column of the same
    name, which must hold boolean True. Any other non-empty token matches no
    doctor, so the result is empty.
    """
    if df is None or df.empty or not consultation_type:
        return df
    if consultation_type not in CONSULTATION_TYPES or consultation_type not in df.columns:
        logger.debug(f"Consultation type '{consultation_type}' matches no doctor")
        return df.iloc[0:0].copy()

    mask = df[consultation_type].apply(lambda v: isinstance(v, (bool, np.bool_)) and bool(v))
    return df[mask.astype(bool)].copy()


def get_unique_specialties(doctor_df: pd.DataFrame) -> list[str]:
    """Extract the sorted unique specialty names offered across the directory.

    Args:
        doctor_df: Doctor DataFrame with an optional "specialities" column

    Returns:
        Sorted list of unique specialty strings
    """
    if doctor_df is None or doctor_df.empty or "specialities" not in doctor_df.columns:
        return []

    unique_specialties = set()
    for _, row in doctor_df.iterrows():
        unique_specialties.update(doctor_specialty_names(row))

    return sorted(unique_specialties)


def filter_doctors_by_specialty(df: pd.DataFrame, selected_specialties) -> pd.DataFrame:
    """Filter doctors by selected specialties.

    A doctor matches if ANY of their specialties is selected (exact,
    case-sensitive names).

    Args:
        df: Doctor DataFrame with a "specialities" column of ``{"name": ...}`` lists
        selected_specialties: Iterable of specialty names; empty or None keeps everyone

    Returns:
        pd.DataFrame: Filtered DataFrame with doctors matching selected specialties
    """
    if df is None or df.empty or not selected_specialties:
        return df
    if "specialities" not in df.columns:
        return df.iloc[0:0].copy()

    selected = set(selected_specialties)

    def matches_specialty(row):
        return any(name in selected for name in doctor_specialty_names(row))

    mask = df.apply(matches_specialty, axis=1)
    return df[mask.astype(bool)].copy()


def filter_specialty_options(options: list[str], search: str) -> list[str]:
    """Narrow the specialty checkbox list to names containing ``search`` (case-insensitive)."""
    if not search:
        return list(options)
    needle = search.lower()
    return [option for option in options if needle in option.lower()]


def sort_doctors(df: pd.DataFrame, sort_by: str) -> pd.DataFrame:
    """Order doctors by fee (low to high) or experience (high to low).

    Both sorts are stable: doctors with equal keys keep their relative order.
    Any other ``sort_by`` value leaves the order unchanged.
    """
    if df is None or df.empty:
        return df

    if sort_by == SORT_BY_FEES:
        keys = [fee_amount(row) for _, row in df.iterrows()]
    elif sort_by == SORT_BY_EXPERIENCE:
        # Negated so an ascending stable sort yields descending experience
        keys = [-experience_years(row) for _, row in df.iterrows()]
    else:
        return df

    # Plain ints: digit runs in fee text can exceed any fixed-width integer
    order = sorted(range(len(keys)), key=keys.__getitem__)
    return df.iloc[order].copy()


def apply_filters(doctor_df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """Derive the displayed doctor list from the full directory and a FilterState.

    This orchestrates the directory pipeline, each step narrowing the previous:
    1. Search term (name substring)
    2. Consultation mode
    3. Specialties
    4. Sort by fees or experience

    The input frame is never modified.

    Args:
        doctor_df: Full doctor directory
        state: Current search, filter and sort criteria

    Returns:
        pd.DataFrame: Matching doctors in display order
    """
    if doctor_df is None:
        return pd.DataFrame()

    working = doctor_df.copy()
    working = filter_doctors_by_search_term(working, state.search_term)
    working = filter_doctors_by_consultation_type(working, state.consultation_type)
    working = filter_doctors_by_specialty(working, state.specialties)
    working = sort_doctors(working, state.sort_by)
    return working


def suggest_doctors(doctor_df: pd.DataFrame, partial_term: str, limit: int = 3) -> pd.DataFrame:
    """Return up to ``limit`` doctors whose name contains ``partial_term``, in directory order.

    Suggestions are only offered once something has been typed: an empty or
    blank term returns an empty frame.
    """
    if doctor_df is None:
        return pd.DataFrame()
    if doctor_df.empty or not partial_term or not partial_term.strip() or limit <= 0 or "name" not in doctor_df.columns:
        return doctor_df.iloc[0:0].copy()
    return doctor_df[_name_contains(doctor_df, partial_term)].head(limit).copy()
