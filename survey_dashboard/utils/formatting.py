import pandas as pd
from typing import Optional

from survey_dashboard.config import IMPROVEMENT_LABELS, SATISFACTION_LABELS

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_response_date(value: Optional[str], tz: str = "UTC") -> str:
    """Render an ISO timestamp as e.g. 'Jul 15, 2023, 02:35 PM'.

    Unparseable values are returned unchanged.
    """
    if value is None:
        return ""
    ts = pd.to_datetime(value, errors="coerce", utc=True)
    if ts is None or pd.isna(ts):
        return str(value)
    try:
        ts = ts.tz_convert(tz)
    except (KeyError, ValueError, TypeError):
        # unknown timezone name, keep UTC
        pass
    # strftime %b and %p follow the host locale
    month = MONTH_ABBREVIATIONS[ts.month - 1]
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{month} {ts.day}, {ts.year}, {hour:02d}:{ts.minute:02d} {meridiem}"


def improvement_label(code: Optional[str]) -> str:
    if code is None:
        return ""
    return IMPROVEMENT_LABELS.get(code, code)


def satisfaction_stars(rating) -> str:
    try:
        filled = max(0, min(int(rating), 5))
    except (TypeError, ValueError):
        return "N/A"
    return "★" * filled + "☆" * (5 - filled)


def satisfaction_label(rating) -> str:
    try:
        return SATISFACTION_LABELS.get(int(rating), str(rating))
    except (TypeError, ValueError):
        return str(rating)


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None or pd.isna(value):
        return "N/A"
    try:
        return f"{float(value):,.{decimals}f}"
    except (TypeError, ValueError):
        return "N/A"
