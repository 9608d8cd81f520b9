"""Tests for the Search page, run headless through Streamlit's AppTest.

The doctor fetch is patched so the page renders from the sample records.
"""
from pathlib import Path
from unittest.mock import patch

from streamlit.testing.v1 import AppTest

from src.controller import FETCH_ERROR_MESSAGE
from src.data.ingestion import FetchFailure, records_to_frame

SEARCH_PAGE = str(Path(__file__).resolve().parents[1] / "pages" / "1_🔎_Search.py")


def button_labels(at):
    return [button.label for button in at.button]


def run_page(doctor_df):
    with patch("src.app_logic.fetch_doctors", return_value=doctor_df):
        at = AppTest.from_file(SEARCH_PAGE, default_timeout=10)
        at.run()
    return at


class TestSuggestions:
    def test_typing_shows_suggestions_before_filtering(self, doctor_df):
        at = run_page(doctor_df)
        at.text_input(key="search_input").input("an").run()

        assert not at.exception
        labels = button_labels(at)
        assert "Dr. Anya Sharma · Dentist" in labels
        assert "Dr. Chandan Rao · General Physician" in labels
        assert "Dr. Divya Anand · DENTIST" in labels
        # Typing alone does not narrow the results
        assert labels.count("Book Appointment") == 4

    def test_accepting_a_suggestion_searches_for_that_doctor(self, doctor_df):
        at = run_page(doctor_df)
        at.text_input(key="search_input").input("an").run()
        at.button(key="suggestion-0").click().run()

        assert not at.exception
        assert at.text_input(key="search_input").value == "Dr. Anya Sharma"
        labels = button_labels(at)
        assert labels.count("Book Appointment") == 1
        assert not any("·" in label for label in labels)

    def test_search_button_submits_typed_text(self, doctor_df):
        at = run_page(doctor_df)
        at.text_input(key="search_input").input("ben").run()
        next(button for button in at.button if button.label == "🔍 Search").click().run()

        assert not at.exception
        assert button_labels(at).count("Book Appointment") == 1


class TestDataQuality:
    def test_summary_shown_for_clean_directory(self, doctor_df):
        at = run_page(doctor_df)

        assert not at.exception
        assert "Directory data summary" in [expander.label for expander in at.expander]
        assert not any("Data Quality Issues" in warning.value for warning in at.warning)

    def test_unnamed_doctor_is_reported(self):
        df = records_to_frame([{"id": "1", "name": "Dr. Ada"}, {"id": "2", "name": ""}])
        at = run_page(df)

        assert not at.exception
        assert any("1 doctors have no name" in warning.value for warning in at.warning)


def test_fetch_failure_shows_error():
    with patch("src.app_logic.fetch_doctors", side_effect=FetchFailure("boom")):
        at = AppTest.from_file(SEARCH_PAGE, default_timeout=10)
        at.run()

    assert not at.exception
    assert at.error[0].value == f"❌ {FETCH_ERROR_MESSAGE}"
    assert "Book Appointment" not in button_labels(at)
