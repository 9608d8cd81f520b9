"""Display helpers for doctor cards and search suggestions.

Every helper accepts a record as a dict or a pandas Series and falls back to
a placeholder instead of raising on missing or malformed fields.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from .cleaning import doctor_specialty_names

NOT_AVAILABLE = "N/A"


def format_text_field(value: Any) -> str:
    """Return stripped text, or "N/A" when the value is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        return NOT_AVAILABLE
    return value.strip()


def format_specialties(record: Mapping[str, Any]) -> str:
    names = doctor_specialty_names(record)
    return ", ".join(names) if names else NOT_AVAILABLE


def primary_specialty(record: Mapping[str, Any], default: str = "DENTIST") -> str:
    """First listed specialty, shown under the name in the suggestion list."""
    names = doctor_specialty_names(record)
    return names[0] if names else default


def valid_photo_url(record: Mapping[str, Any]) -> Optional[str]:
    """Return the photo URL when it is an absolute http(s) URL, else None."""
    photo = record.get("photo")
    if not isinstance(photo, str):
        return None
    photo = photo.strip()
    if photo.startswith(("http://", "https://")):
        return photo
    return None


def display_initials(record: Mapping[str, Any]) -> str:
    initials = record.get("name_initials")
    if isinstance(initials, str) and initials.strip():
        return initials.strip()
    return "NA"


def clinic_summary(record: Mapping[str, Any]) -> Optional[Tuple[str, str]]:
    """Return (clinic name, locality) for the card footer, or None without a clinic."""
    clinic = record.get("clinic")
    if not isinstance(clinic, Mapping):
        return None

    address = clinic.get("address")
    locality = address.get("locality") if isinstance(address, Mapping) else None
    return format_text_field(clinic.get("name")), format_text_field(locality)


def specialty_widget_key(specialty: str) -> str:
    return "filter-specialty-" + re.sub(r"\s+", "-", specialty).replace("/", "-")
