"""Utilities package for the Doctor Directory.

Re-export stable helper functions from the utility submodules.
"""
# This module intentionally re-exports symbols from submodules. Flake8 F401
# warnings are expected for re-exported names and are silenced locally.
# flake8: noqa: F401

from .cleaning import doctor_specialty_names, experience_years, fee_amount, validate_doctor_data
from .formatting import (
    clinic_summary,
    display_initials,
    format_specialties,
    format_text_field,
    primary_specialty,
    specialty_widget_key,
    valid_photo_url,
)
from .query_state import FilterState, decode, encode, has_active_filters
