"""Shared sidebar rendering for season data source selection."""

from __future__ import annotations

import streamlit as st

from .data import SeasonDataRepository, get_active_source, get_repository, set_active_source


def render_source_sidebar() -> SeasonDataRepository:
    """Render the data source input in the sidebar and return its repository.

    The entered path or URL is kept in session state so that every page reads
    the same season file.
    """
    current = get_active_source()
    entered = st.sidebar.text_input(
        "Season CSV (path or URL)",
        value=current,
        help="Generate a synthetic season with `dragstats-generate`.",
    )
    if entered.strip() and entered.strip() != current:
        set_active_source(entered)

    if st.sidebar.button("Reload data"):
        st.cache_data.clear()

    return get_repository()
