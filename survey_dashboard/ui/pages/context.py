from __future__ import annotations

from dataclasses import dataclass
from typing import List

from survey_dashboard.config import Settings
from survey_dashboard.data.models import SurveyResponse, SurveySummary


@dataclass
class PageContext:
    responses: List[SurveyResponse]
    summary: SurveySummary
    settings: Settings
