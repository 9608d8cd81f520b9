"""Interaction controller for the doctor directory page.

``DirectoryController`` is the single owner of the current ``FilterState``,
the loaded doctor frame and the derived result list. The page sends it named
intents (``SetSearch``, ``ToggleConsultation`` ...) and reads back a
``DirectorySnapshot``. After every transition the controller recomputes the
results and pushes the encoded state to the navigator when it changed.

Usage:
    controller = DirectoryController(StreamlitNavigator())
    controller.load(load_directory_data)
    controller.dispatch(SetSort("fees"))
    snapshot = controller.snapshot()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Protocol, Union
from urllib.parse import parse_qsl

import pandas as pd
import streamlit as st

from src.app_logic import apply_filters, suggest_doctors
from src.data.ingestion import FetchFailure
from src.utils.query_state import FilterState, decode, decode_params, encode

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch doctor data. Please try again later."


class Navigator(Protocol):
    """Read/replace access to the query string of the current location."""

    def read(self) -> str:
        ...

    def replace(self, query: str) -> None:
        ...


class StreamlitNavigator:
    """Navigator backed by ``st.query_params``; the page path is left untouched."""

    def read(self) -> str:
        # Canonical form, so a hand-ordered URL compares equal to encode(state)
        return encode(decode_params(st.query_params.to_dict()))

    def replace(self, query: str) -> None:
        st.query_params.from_dict(dict(parse_qsl(query, keep_blank_values=True)))


class MemoryNavigator:
    """In-memory navigator for scripts and tests; records every replacement."""

    def __init__(self, query: str = ""):
        self.query = query
        self.history: List[str] = []

    def read(self) -> str:
        return self.query

    def replace(self, query: str) -> None:
        self.history.append(query)
        self.query = query


# --- Intents ---


@dataclass(frozen=True)
class SetSearch:
    term: str


@dataclass(frozen=True)
class ToggleConsultation:
    consultation_type: str


@dataclass(frozen=True)
class SelectAllConsultations:
    pass


@dataclass(frozen=True)
class ToggleSpecialty:
    specialty: str


@dataclass(frozen=True)
class SetSort:
    sort_by: str


@dataclass(frozen=True)
class ClearAll:
    pass


Intent = Union[SetSearch, ToggleConsultation, SelectAllConsultations, ToggleSpecialty, SetSort, ClearAll]


@dataclass(frozen=True, eq=False)
class DirectorySnapshot:
    """What the display layer renders for one cycle."""

    results: pd.DataFrame
    state: FilterState
    is_loading: bool
    error: Optional[str]


def transition(state: FilterState, intent: Intent) -> FilterState:
    """Return the FilterState that follows ``state`` after ``intent``.

    Consultation type and sort behave like radio buttons that clear when the
    active option is chosen again.
    """
    if isinstance(intent, SetSearch):
        return replace(state, search_term=intent.term)
    if isinstance(intent, ToggleConsultation):
        new_type = "" if intent.consultation_type == state.consultation_type else intent.consultation_type
        return replace(state, consultation_type=new_type)
    if isinstance(intent, SelectAllConsultations):
        return replace(state, consultation_type="")
    if isinstance(intent, ToggleSpecialty):
        if intent.specialty in state.specialties:
            remaining = tuple(s for s in state.specialties if s != intent.specialty)
            return replace(state, specialties=remaining)
        return replace(state, specialties=state.specialties + (intent.specialty,))
    if isinstance(intent, SetSort):
        new_sort = "" if intent.sort_by == state.sort_by else intent.sort_by
        return replace(state, sort_by=new_sort)
    if isinstance(intent, ClearAll):
        return replace(state, consultation_type="", specialties=())
    raise TypeError(f"Unsupported intent: {intent!r}")


class DirectoryController:
    """Owns the directory's filter state and derived results for one session."""

    def __init__(self, navigator: Navigator):
        self.navigator = navigator
        self.state = decode(navigator.read())
        self.doctors = pd.DataFrame()
        self.results = pd.DataFrame()
        self.is_loading = False
        self.error: Optional[str] = None
        self._loaded = False
        self._subscribers: List[Callable[[DirectorySnapshot], None]] = []

    def load(self, fetch: Callable[[], pd.DataFrame]) -> None:
        """Run the one-time doctor fetch. Later calls do nothing, whether it succeeded or failed."""
        if self._loaded:
            return

        self.is_loading = True
        self._notify()
        try:
            self.doctors = fetch()
            self.error = None
        except FetchFailure as e:
            logger.warning(f"Doctor directory unavailable: {e}")
            self.doctors = pd.DataFrame()
            self.error = FETCH_ERROR_MESSAGE
        finally:
            self.is_loading = False
            self._loaded = True

        self._recompute()
        self._notify()

    def dispatch(self, intent: Intent) -> FilterState:
        """Apply a user intent, recompute the results and sync the query string."""
        new_state = transition(self.state, intent)
        logger.debug(f"{type(intent).__name__}: {self.state} -> {new_state}")
        self.state = new_state
        self._recompute()
        self._sync_query_string()
        self._notify()
        return new_state

    def suggestions(self, partial_term: str, limit: int = 3) -> pd.DataFrame:
        return suggest_doctors(self.doctors, partial_term, limit)

    def snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            results=self.results,
            state=self.state,
            is_loading=self.is_loading,
            error=self.error,
        )

    def subscribe(self, callback: Callable[[DirectorySnapshot], None]) -> Callable[[], None]:
        """Register ``callback`` for snapshots; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _recompute(self) -> None:
        if self.doctors.empty:
            self.results = self.doctors.copy()
        else:
            self.results = apply_filters(self.doctors, self.state)

    def _sync_query_string(self) -> None:
        new_query = encode(self.state)
        if new_query != self.navigator.read():
            logger.debug(f"Updating query string to '{new_query}'")
            self.navigator.replace(new_query)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)
