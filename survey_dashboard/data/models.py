"""
Record types exchanged between the survey data source, the core filtering and
export helpers, and the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SurveyResponse:
    id: str
    date: str
    satisfaction: int
    improvement: str
    recommendation: int
    comments: str = ""

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "SurveyResponse":
        """Build a response from a plain mapping as returned by a data source.

        Values are kept as given; only a missing comment is normalised to "".
        """
        comments = record.get("comments")
        return cls(
            id=str(record.get("id", "")),
            date=record.get("date", ""),
            satisfaction=record.get("satisfaction"),
            improvement=record.get("improvement", ""),
            recommendation=record.get("recommendation"),
            comments="" if comments is None else str(comments),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "satisfaction": self.satisfaction,
            "improvement": self.improvement,
            "recommendation": self.recommendation,
            "comments": self.comments,
        }


@dataclass(frozen=True)
class SurveySummary:
    total_responses: int
    completion_rate: Optional[str]
    average_satisfaction: Optional[float]
    responses_by_day: List[Tuple[str, int]] = field(default_factory=list)
    satisfaction_distribution: List[Tuple[int, int]] = field(default_factory=list)
    improvements: List[Tuple[str, int]] = field(default_factory=list)


@dataclass(frozen=True)
class SurveySubmission:
    satisfaction: str
    improvement: str
    recommendation: str
    comments: str = ""

    def to_record(self) -> Dict[str, str]:
        return {
            "satisfaction": self.satisfaction,
            "improvement": self.improvement,
            "recommendation": self.recommendation,
            "comments": self.comments,
        }


def responses_from_records(records) -> List[SurveyResponse]:
    return [SurveyResponse.from_record(record) for record in records]
