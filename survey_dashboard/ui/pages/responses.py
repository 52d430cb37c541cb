from __future__ import annotations

import logging

import streamlit as st

from survey_dashboard.data.filters import apply_response_filters, serialize_filters
from survey_dashboard.ui.components.tables import render_export_button, render_responses_table
from survey_dashboard.ui.layout import active_filter_badges, response_filter_controls
from survey_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)


def render(context: PageContext) -> None:
    st.subheader("Survey Responses")

    filters = response_filter_controls()
    filtered = apply_response_filters(context.responses, filters)
    logger.debug("Active response filters: %s", serialize_filters(filters))

    badges = active_filter_badges(filters)
    summary_text = " | ".join(f"{k}: {v}" for k, v in badges.items()) if badges else "All responses"
    st.caption(f"{summary_text} · showing {len(filtered)} of {len(context.responses)} responses")

    render_export_button(filtered, tz=context.settings.display_timezone)
    render_responses_table(filtered, tz=context.settings.display_timezone)
