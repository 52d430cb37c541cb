"""
Validation of survey-form answers before they are handed to the data source.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from survey_dashboard.data.models import SurveySubmission

REQUIRED_FIELDS: Dict[str, str] = {
    "satisfaction": "Please select your satisfaction level",
    "improvements": "Please select an area for improvement",
    "likely_to_recommend": "Please select how likely you are to recommend",
}


class SubmissionValidationError(ValueError):
    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in errors.items()))
        self.errors = errors


def _as_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def validate_submission(values: Mapping[str, Any]) -> Dict[str, str]:
    """Return field -> message for every required answer left empty."""
    return {
        field: message
        for field, message in REQUIRED_FIELDS.items()
        if not _as_text(values.get(field))
    }


def build_submission(values: Mapping[str, Any]) -> SurveySubmission:
    errors = validate_submission(values)
    if errors:
        raise SubmissionValidationError(errors)
    return SurveySubmission(
        satisfaction=_as_text(values.get("satisfaction")),
        improvement=_as_text(values.get("improvements")),
        recommendation=_as_text(values.get("likely_to_recommend")),
        comments=_as_text(values.get("comments")),
    )
