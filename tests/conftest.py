"""Pytest configuration helpers.

Ensure the project root is on sys.path so tests can import the `src` package
when pytest is invoked from the repository root or an isolated test runner.
"""

import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Insert the repository root (parent of the tests directory) at the front
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def sample_doctor_records():
    """Raw doctor records shaped like the directory endpoint's JSON."""
    return [
        {
            "id": "101",
            "name": "Dr. Anya Sharma",
            "name_initials": "AS",
            "photo": "https://example.com/anya.jpg",
            "specialities": [{"name": "Dentist"}],
            "fees": "₹ 500",
            "experience": "5 Years of experience",
            "clinic": {"name": "Smile Care", "address": {"locality": "Indiranagar", "city": "Bangalore"}},
            "video_consult": True,
            "in_clinic": False,
        },
        {
            "id": "102",
            "name": "Dr. Ben Mathew",
            "name_initials": "BM",
            "photo": "",
            "specialities": [{"name": "Dermatologist"}, {"name": "Cosmetologist"}],
            "fees": "₹ 300",
            "experience": "10 Years of experience",
            "clinic": {"name": "Skin First", "address": {"locality": "Koramangala", "city": "Bangalore"}},
            "video_consult": False,
            "in_clinic": True,
        },
        {
            "id": "103",
            "name": "Dr. Chandan Rao",
            "name_initials": "CR",
            "specialities": [{"name": "General Physician"}, {"name": "Dentist"}],
            "fees": "₹ 300",
            "experience": "10 Years of experience",
            "video_consult": True,
            "in_clinic": True,
        },
        {
            "id": "104",
            "name": "Dr. Divya Anand",
            "name_initials": "DA",
            "specialities": [],
            "fees": "Free",
            "experience": "",
            "video_consult": False,
            "in_clinic": False,
        },
    ]


@pytest.fixture
def doctor_df(sample_doctor_records):
    """Sample records loaded the same way the app loads the endpoint payload."""
    from src.data.ingestion import records_to_frame

    return records_to_frame(sample_doctor_records)


@pytest.fixture
def scenario_df():
    """The two-doctor directory used in the documented sort/filter scenario."""
    from src.data.ingestion import records_to_frame

    return records_to_frame(
        [
            {
                "id": "1",
                "name": "Dr. Anya",
                "fees": "₹ 500",
                "experience": "5 Years",
                "specialities": [{"name": "Dentist"}],
                "video_consult": True,
                "in_clinic": False,
            },
            {
                "id": "2",
                "name": "Dr. Ben",
                "fees": "₹ 300",
                "experience": "10 Years of experience",
                "specialities": [{"name": "Dermatologist"}],
                "video_consult": False,
                "in_clinic": True,
            },
        ]
    )


@pytest.fixture
def fake_secrets(monkeypatch):
    """Replace Streamlit secrets with a plain nested dict for config tests.

    Returns the dict so tests can fill in the values they need.
    """
    import streamlit as st

    secrets = {}
    monkeypatch.setattr(st, "secrets", secrets)
    return secrets
