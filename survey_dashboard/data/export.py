"""
CSV export of (already filtered) survey responses.
"""

from __future__ import annotations

import csv
import datetime as dt
from typing import List, Optional, Sequence

import pandas as pd

from survey_dashboard.data.models import SurveyResponse
from survey_dashboard.utils.formatting import format_response_date, improvement_label

CSV_HEADERS: List[str] = [
    "Date",
    "Satisfaction",
    "Area for Improvement",
    "Recommendation Score",
    "Comments",
]
CSV_MIME = "text/csv; charset=utf-8"
EXPORT_FILE_PREFIX = "survey_responses"


def responses_to_frame(responses: Sequence[SurveyResponse], tz: str = "UTC") -> pd.DataFrame:
    """Project responses onto the export columns, keeping raw values as objects."""
    rows = [
        [
            format_response_date(response.date, tz),
            response.satisfaction,
            improvement_label(response.improvement),
            response.recommendation,
            response.comments,
        ]
        for response in responses
    ]
    return pd.DataFrame(rows, columns=CSV_HEADERS, dtype=object)


def responses_to_csv(responses: Sequence[SurveyResponse], tz: str = "UTC") -> str:
    """
    Serialise responses to a CSV document.

    The header row always comes first and rows follow input order. Text
    fields (date, improvement label and comments) are always double-quoted
    with embedded quotes doubled; numeric fields are written bare. Rows are
    joined by newlines with no trailing newline.
    """
    header = ",".join(CSV_HEADERS)
    frame = responses_to_frame(responses, tz)
    if frame.empty:
        return header
    body = frame.to_csv(
        index=False,
        header=False,
        quoting=csv.QUOTE_NONNUMERIC,
        lineterminator="\n",
    )
    return header + "\n" + body.removesuffix("\n")


def responses_to_csv_bytes(responses: Sequence[SurveyResponse], tz: str = "UTC") -> bytes:
    return responses_to_csv(responses, tz).encode("utf-8")


def export_file_name(today: Optional[dt.date] = None) -> str:
    today = today or dt.datetime.now(dt.timezone.utc).date()
    return f"{EXPORT_FILE_PREFIX}_{today.isoformat()}.csv"
