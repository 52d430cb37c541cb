"""
Summary statistics derived from a list of survey responses.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pandas as pd

from survey_dashboard.config import IMPROVEMENT_LABELS
from survey_dashboard.data.models import SurveyResponse, SurveySummary

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
PROMOTER_MIN = 9
DETRACTOR_MAX = 6


def _numeric(responses: Sequence[SurveyResponse], attr: str) -> pd.Series:
    return pd.to_numeric(pd.Series([getattr(r, attr) for r in responses], dtype=object), errors="coerce")


def average_satisfaction(responses: Sequence[SurveyResponse]) -> Optional[float]:
    ratings = _numeric(responses, "satisfaction")
    ratings = ratings[ratings.between(1, 5)]
    if ratings.empty:
        return None
    return round(float(ratings.mean()), 1)


def satisfaction_distribution(responses: Sequence[SurveyResponse]) -> List[Tuple[int, int]]:
    counts = _numeric(responses, "satisfaction").value_counts()
    return [(rating, int(counts.get(rating, 0))) for rating in range(5, 0, -1)]


def improvement_counts(responses: Sequence[SurveyResponse]) -> List[Tuple[str, int]]:
    counts = pd.Series([r.improvement for r in responses], dtype=object).value_counts()
    ordered = [(code, int(counts.get(code, 0))) for code in IMPROVEMENT_LABELS]
    extras = [(str(code), int(n)) for code, n in counts.items() if code not in IMPROVEMENT_LABELS]
    return ordered + extras


def responses_by_day(responses: Sequence[SurveyResponse]) -> List[Tuple[str, int]]:
    if not responses:
        return [(day, 0) for day in WEEKDAYS]
    raw = pd.Series([r.date for r in responses], dtype=object)
    dates = pd.to_datetime(raw, errors="coerce", utc=True, format="ISO8601")
    counts = dates.dropna().dt.dayofweek.value_counts()
    return [(day, int(counts.get(idx, 0))) for idx, day in enumerate(WEEKDAYS)]


def net_promoter_score(responses: Sequence[SurveyResponse]) -> Optional[float]:
    """Percentage of promoters (9-10) minus percentage of detractors (0-6)."""
    scores = _numeric(responses, "recommendation")
    scores = scores[scores.between(0, 10)]
    if scores.empty:
        return None
    promoters = (scores >= PROMOTER_MIN).sum()
    detractors = (scores <= DETRACTOR_MAX).sum()
    return round(float((promoters - detractors) / len(scores) * 100), 1)


def summarize_responses(
    responses: Sequence[SurveyResponse],
    completion_rate: Optional[str] = None,
) -> SurveySummary:
    return SurveySummary(
        total_responses=len(responses),
        completion_rate=completion_rate,
        average_satisfaction=average_satisfaction(responses),
        responses_by_day=responses_by_day(responses),
        satisfaction_distribution=satisfaction_distribution(responses),
        improvements=improvement_counts(responses),
    )
