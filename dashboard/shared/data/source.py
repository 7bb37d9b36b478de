"""Season data source selection for the dashboard."""

from __future__ import annotations

import os
from pathlib import Path

import streamlit as st

SOURCE_STATE_KEY = "data_source"
SOURCE_ENV_VAR = "DRAGSTATS_DATA"

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[3] / "data" / "drag_racing_season_data.csv"


def get_default_source() -> str:
    """Return the environment-configured source, or the bundled CSV path."""
    return os.environ.get(SOURCE_ENV_VAR) or str(DEFAULT_DATA_PATH)


def get_active_source() -> str:
    """Return the season CSV location currently selected in the session."""
    value = st.session_state.get(SOURCE_STATE_KEY)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return get_default_source()


def set_active_source(source: str) -> None:
    """Remember *source* for the rest of the browser session."""
    st.session_state[SOURCE_STATE_KEY] = source.strip()
