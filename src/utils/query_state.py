"""Filter state and its mapping to URL query parameters.

The directory page keeps its search, filter and sort choices in the URL so a
filtered view can be bookmarked or shared. ``FilterState`` is the structured
form; ``encode``/``decode`` convert it to and from the query string.

Usage:
    from src.utils.query_state import FilterState, decode, encode

    state = decode("sortBy=fees&specialties=Dentist,Dermatologist")
    encode(state)  # 'specialties=Dentist%2CDermatologist&sortBy=fees'

The codec does no validation: an unknown ``consultationType`` or ``sortBy``
token passes through unchanged and simply matches nothing downstream.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple
from urllib.parse import parse_qsl, urlencode

SEARCH_KEY = "search"
CONSULTATION_KEY = "consultationType"
SPECIALTIES_KEY = "specialties"
SORT_KEY = "sortBy"

# Serialization order of the recognized keys
QUERY_KEYS = (SEARCH_KEY, CONSULTATION_KEY, SPECIALTIES_KEY, SORT_KEY)

VIDEO_CONSULT = "video_consult"
IN_CLINIC = "in_clinic"
CONSULTATION_TYPES = (VIDEO_CONSULT, IN_CLINIC)

SORT_BY_FEES = "fees"
SORT_BY_EXPERIENCE = "experience"
SORT_OPTIONS = (SORT_BY_FEES, SORT_BY_EXPERIENCE)


@dataclass(frozen=True)
class FilterState:
    """Search, filter and sort criteria chosen by the user at one point in time."""

    search_term: str = ""
    consultation_type: str = ""
    specialties: Tuple[str, ...] = ()
    sort_by: str = ""


def decode_params(params: Mapping[str, str]) -> FilterState:
    """Build a FilterState from already-split query parameters.

    Unknown keys are ignored and missing keys fall back to the defaults.
    """
    raw_specialties = params.get(SPECIALTIES_KEY) or ""
    specialties = tuple(raw_specialties.split(",")) if raw_specialties else ()
    return FilterState(
        search_term=params.get(SEARCH_KEY) or "",
        consultation_type=params.get(CONSULTATION_KEY) or "",
        specialties=specialties,
        sort_by=params.get(SORT_KEY) or "",
    )


def encode_params(state: FilterState) -> Dict[str, str]:
    """Return the query parameters for ``state``, leaving out every default value."""
    values = {
        SEARCH_KEY: state.search_term,
        CONSULTATION_KEY: state.consultation_type,
        SPECIALTIES_KEY: ",".join(state.specialties),
        SORT_KEY: state.sort_by,
    }
    return {key: values[key] for key in QUERY_KEYS if values[key]}


def decode(query_string: str) -> FilterState:
    """Parse a URL query string (with or without the leading ``?``) into a FilterState."""
    query = (query_string or "").lstrip("?")
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        # First occurrence wins, as with URLSearchParams.get
        params.setdefault(key, value)
    return decode_params(params)


def encode(state: FilterState) -> str:
    """Serialize a FilterState; the default state encodes to an empty string."""
    return urlencode(encode_params(state))


def has_active_filters(state: FilterState) -> bool:
    """True when a consultation type or any specialty is selected."""
    return bool(state.consultation_type or state.specialties)
