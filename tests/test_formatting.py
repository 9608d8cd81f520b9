"""Tests for doctor card display helpers."""
import pandas as pd
import pytest

from src.utils.formatting import (
    clinic_summary,
    display_initials,
    format_specialties,
    format_text_field,
    primary_specialty,
    specialty_widget_key,
    valid_photo_url,
)


def test_format_specialties(sample_doctor_records):
    assert format_specialties(sample_doctor_records[1]) == "Dermatologist, Cosmetologist"
    assert format_specialties(sample_doctor_records[3]) == "N/A"


def test_primary_specialty(sample_doctor_records):
    assert primary_specialty(sample_doctor_records[2]) == "General Physician"
    assert primary_specialty(sample_doctor_records[3]) == "DENTIST"
    assert primary_specialty({}, default="Unknown") == "Unknown"


@pytest.mark.parametrize(
    "value, expected",
    [("  ₹ 500 ", "₹ 500"), ("", "N/A"), ("   ", "N/A"), (None, "N/A"), (float("nan"), "N/A")],
)
def test_format_text_field(value, expected):
    assert format_text_field(value) == expected


class TestPhotoUrl:
    def test_http_urls_are_kept(self):
        assert valid_photo_url({"photo": " https://example.com/a.jpg "}) == "https://example.com/a.jpg"
        assert valid_photo_url({"photo": "http://example.com/a.jpg"}) == "http://example.com/a.jpg"

    def test_relative_or_missing_urls_are_rejected(self):
        assert valid_photo_url({"photo": "/images/a.jpg"}) is None
        assert valid_photo_url({"photo": ""}) is None
        assert valid_photo_url({}) is None

    def test_series_row(self):
        row = pd.Series({"photo": float("nan")})
        assert valid_photo_url(row) is None


def test_display_initials():
    assert display_initials({"name_initials": "AS"}) == "AS"
    assert display_initials({"name_initials": ""}) == "NA"
    assert display_initials({}) == "NA"


class TestClinicSummary:
    def test_clinic_with_locality(self, sample_doctor_records):
        assert clinic_summary(sample_doctor_records[0]) == ("Smile Care", "Indiranagar")

    def test_clinic_without_address(self):
        assert clinic_summary({"clinic": {"name": "Care Point"}}) == ("Care Point", "N/A")

    def test_no_clinic(self, sample_doctor_records):
        assert clinic_summary(sample_doctor_records[2]) is None
        assert clinic_summary({"clinic": float("nan")}) is None


def test_specialty_widget_key():
    assert specialty_widget_key("General Physician") == "filter-specialty-General-Physician"
    assert specialty_widget_key("Ear-Nose-Throat (ENT)/Surgeon") == "filter-specialty-Ear-Nose-Throat-(ENT)-Surgeon"
