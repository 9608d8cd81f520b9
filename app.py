"""
Streamlit app entrypoint - navigation and startup checks.

This module serves as the entrypoint and handles:
- Logging setup from the configured log level
- Configuration validation (logged, never fatal)
- Navigation to the directory pages

The doctor list itself is fetched by the Search page, once per browser
session, through the DirectoryController.
"""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

st.set_page_config(page_title="Doctor Directory", page_icon=":stethoscope:", layout="wide")

from src.utils.config import configure_logging, validate_configuration  # noqa: E402 - after set_page_config

logger = logging.getLogger(__name__)

__all__ = ["startup_checks"]


def startup_checks() -> dict:
    """Configure logging and report configuration issues.

    Returns:
        The issues found by ``validate_configuration`` (empty when all is well)
    """
    configure_logging()
    issues = validate_configuration()
    for component, issue in issues.items():
        logger.warning(f"Configuration issue ({component}): {issue}")
    return issues


_current_file = Path(__file__).name
_nav_items = [
    ("pages/1_🔎_Search.py", "Find a Doctor", "🔎"),
    ("pages/10_🛠️_How_It_Works.py", "How It Works", "🛠️"),
]


def _build_and_run_app():
    """Build navigation after the startup checks.

    Intentionally encapsulated to prevent duplicate rendering when pages import app.
    """
    startup_checks()
    nav_pages = [st.Page(path, title=title, icon=icon) for path, title, icon in _nav_items if path != _current_file]
    pg = st.navigation(nav_pages)
    pg.run()


if __name__ == "__main__":
    _build_and_run_app()
