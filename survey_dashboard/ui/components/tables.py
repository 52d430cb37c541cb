"""
Rendering of the survey response table and its CSV export button.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from survey_dashboard.data.export import CSV_MIME, export_file_name, responses_to_csv_bytes
from survey_dashboard.data.models import SurveyResponse
from survey_dashboard.utils.formatting import (
    format_response_date,
    improvement_label,
    satisfaction_stars,
)

NO_COMMENTS = "No comments"


def responses_display_frame(responses: Sequence[SurveyResponse], tz: str = "UTC") -> pd.DataFrame:
    rows = [
        {
            "Date": format_response_date(r.date, tz),
            "Satisfaction": satisfaction_stars(r.satisfaction),
            "Area for Improvement": improvement_label(r.improvement),
            "Recommendation": f"{r.recommendation}/10",
            "Comments": r.comments or NO_COMMENTS,
        }
        for r in responses
    ]
    return pd.DataFrame(
        rows,
        columns=["Date", "Satisfaction", "Area for Improvement", "Recommendation", "Comments"],
    )


def render_export_button(responses: Sequence[SurveyResponse], tz: str = "UTC", key: str = "sr_export") -> None:
    st.download_button(
        "Export",
        data=responses_to_csv_bytes(responses, tz),
        file_name=export_file_name(),
        mime=CSV_MIME,
        key=key,
        icon=":material/download:",
    )


def render_responses_table(responses: Sequence[SurveyResponse], tz: str = "UTC", height: int = 400) -> None:
    if not responses:
        st.info("No results found.")
        return

    st.dataframe(
        responses_display_frame(responses, tz),
        use_container_width=True,
        height=height,
        hide_index=True,
        column_config={
            "Comments": st.column_config.TextColumn("Comments", width="large"),
        },
    )
