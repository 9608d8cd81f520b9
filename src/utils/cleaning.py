"""Record normalization helpers: numeric parsing of free-text fields and data checks."""
import re
from collections.abc import Mapping
from typing import Any, List

import pandas as pd

_FIRST_NUMBER = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]")


def _text_field(record: Mapping[str, Any], key: str) -> str:
    try:
        value = record.get(key)
    except AttributeError:
        return ""
    return value if isinstance(value, str) else ""


def experience_years(record: Mapping[str, Any]) -> int:
    """Return the years of experience parsed from ``record["experience"]``.

    The first run of digits wins, so "10 Years of experience" -> 10.
    Missing or digit-free text counts as 0.
    """
    match = _FIRST_NUMBER.search(_text_field(record, "experience"))
    return int(match.group()) if match else 0


def fee_amount(record: Mapping[str, Any]) -> int:
    """Return the consultation fee from ``record["fees"]`` with every non-digit stripped.

    "₹ 500" -> 500. Missing or digit-free text counts as 0.
    """
    digits = _NON_DIGITS.sub("", _text_field(record, "fees"))
    return int(digits) if digits else 0


def doctor_specialty_names(record: Mapping[str, Any]) -> List[str]:
    """Return the specialty names of a record, in their original order."""
    try:
        specialities = record.get("specialities")
    except AttributeError:
        return []
    if not isinstance(specialities, (list, tuple)):
        return []

    names = []
    for spec in specialities:
        if isinstance(spec, Mapping):
            name = spec.get("name")
            if isinstance(name, str) and name:
                names.append(name)
    return names


def validate_doctor_data(df: pd.DataFrame) -> tuple[bool, str]:
    """Summarize the quality of a loaded doctor directory.

    Unnamed doctors and a missing ``name`` column count as issues. Doctors
    without a specialty, or whose fee/experience text holds no digits, are
    only reported in the summary since they still appear in results.

    Args:
        df: Doctor directory as returned by ``fetch_doctors``

    Returns:
        tuple[bool, str]: ``(is_valid, message)`` where ``is_valid`` is False
        when any issue was found and ``message`` is markdown for display
    """
    if df is None or df.empty:
        return False, "❌ **Error**: No doctor data available. Please check the data source."

    issues = []
    info = []

    if "name" not in df.columns:
        issues.append("Missing required column: name")
    else:
        unnamed = df["name"].apply(lambda v: not isinstance(v, str) or not v.strip()).sum()
        if unnamed > 0:
            issues.append(f"{unnamed} doctors have no name")

    no_specialty = df.apply(lambda row: not doctor_specialty_names(row), axis=1).sum()
    if no_specialty > 0:
        info.append(f"{no_specialty} doctors list no specialty")

    # Digit-free text is not an error: it is read as 0 and kept in the results
    for column, label in (("fees", "fee"), ("experience", "experience")):
        if column not in df.columns:
            info.append(f"{column} column not found - every {label} will read as 0")
            continue
        unparsable = df[column].apply(lambda v: not isinstance(v, str) or _FIRST_NUMBER.search(v) is None).sum()
        if unparsable > 0:
            info.append(f"{unparsable} doctors have no numeric {label} (treated as 0)")

    info.append(f"Total doctors in directory: {len(df)}")

    message_parts = []
    if issues:
        message_parts.append("⚠️ **Data Quality Issues**: " + "; ".join(issues))
    if info:
        message_parts.append("ℹ️ **Data Summary**: " + "; ".join(info))

    return len(issues) == 0, "\n\n".join(message_parts)
