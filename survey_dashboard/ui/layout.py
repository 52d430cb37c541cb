"""
Layout helpers for the Streamlit application (page setup, sidebar, filter bar).
"""

from __future__ import annotations

from typing import Dict

import streamlit as st

from survey_dashboard.data.filters import ALL_RATINGS, DEFAULT_FILTERS, ResponseFilters
from survey_dashboard.utils.formatting import satisfaction_stars

RATING_OPTIONS = [ALL_RATINGS, "5", "4", "3", "2", "1"]


def _rating_option_label(option: str) -> str:
    if option == ALL_RATINGS:
        return "All Ratings"
    return f"{satisfaction_stars(option)} ({option})"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Surveylytic Dashboard",
        layout="wide",
        page_icon=":bar_chart:",
    )


def sidebar_controls() -> bool:
    """Render the sidebar and return True when a data refresh was requested."""
    st.sidebar.header("Data")
    refresh = st.sidebar.button("🔄 Refresh Data")
    st.sidebar.caption("Survey data is served by the configured data source.")
    return refresh


def response_filter_controls(
    defaults: ResponseFilters = DEFAULT_FILTERS, key_prefix: str = "sr"
) -> ResponseFilters:
    """
    Render the search box and rating select above the response table and
    return the current selection. Widget state lives in st.session_state.
    """
    col_search, col_rating = st.columns([3, 1])
    with col_search:
        search_text = st.text_input(
            "Search comments",
            value=defaults.search_text,
            placeholder="Search comments...",
            key=f"{key_prefix}_search",
        )
    with col_rating:
        default_rating = str(defaults.satisfaction)
        rating = st.selectbox(
            "Filter by satisfaction",
            options=RATING_OPTIONS,
            index=RATING_OPTIONS.index(default_rating) if default_rating in RATING_OPTIONS else 0,
            format_func=_rating_option_label,
            key=f"{key_prefix}_rating",
        )
    return ResponseFilters(satisfaction=rating, search_text=search_text)


def active_filter_badges(filters: ResponseFilters) -> Dict[str, str]:
    badges = {}
    if str(filters.satisfaction) != ALL_RATINGS:
        badges["Rating"] = str(filters.satisfaction)
    if filters.search_text:
        badges["Search"] = f"“{filters.search_text}”"
    return badges
