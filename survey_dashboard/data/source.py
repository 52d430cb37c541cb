"""
Survey data sources. The mock source serves fixed sample data after a
simulated network delay; a backend-backed source implements the same
interface.
"""

from __future__ import annotations

import abc
import asyncio
import logging
from typing import Any, Dict, List

from survey_dashboard.config import Settings
from survey_dashboard.data.models import (
    SurveyResponse,
    SurveySubmission,
    SurveySummary,
    responses_from_records,
)

logger = logging.getLogger(__name__)

# Simulated latency in seconds
SUMMARY_DELAY = 1.0
RESPONSES_DELAY = 1.5
SUBMIT_DELAY = 1.0

MOCK_SUMMARY = SurveySummary(
    total_responses=245,
    completion_rate="78%",
    average_satisfaction=4.2,
    responses_by_day=[
        ("Mon", 32),
        ("Tue", 45),
        ("Wed", 39),
        ("Thu", 50),
        ("Fri", 55),
        ("Sat", 15),
        ("Sun", 9),
    ],
    satisfaction_distribution=[(5, 120), (4, 80), (3, 25), (2, 15), (1, 5)],
    improvements=[
        ("Product Quality", 15),
        ("Pricing", 85),
        ("Shipping", 60),
        ("Website UX", 45),
        ("Customer Service", 40),
    ],
)

MOCK_RESPONSE_RECORDS: List[Dict[str, Any]] = [
    {
        "id": "resp-001",
        "date": "2023-07-15T14:35:00Z",
        "satisfaction": 5,
        "improvement": "shipping",
        "recommendation": 9,
        "comments": "Great products, but shipping took longer than expected.",
    },
    {
        "id": "resp-002",
        "date": "2023-07-14T10:20:00Z",
        "satisfaction": 4,
        "improvement": "pricing",
        "recommendation": 7,
        "comments": "Love the quality, but prices are a bit high compared to competitors.",
    },
    {
        "id": "resp-003",
        "date": "2023-07-14T09:15:00Z",
        "satisfaction": 3,
        "improvement": "website_ux",
        "recommendation": 5,
        "comments": "The checkout process was confusing.",
    },
    {
        "id": "resp-004",
        "date": "2023-07-13T16:42:00Z",
        "satisfaction": 5,
        "improvement": "product_quality",
        "recommendation": 10,
        "comments": "Absolutely love everything about your store!",
    },
    {
        "id": "resp-005",
        "date": "2023-07-13T12:05:00Z",
        "satisfaction": 2,
        "improvement": "customer_service",
        "recommendation": 3,
        "comments": "Had trouble reaching customer service about my order status.",
    },
    {
        "id": "resp-006",
        "date": "2023-07-12T08:30:00Z",
        "satisfaction": 4,
        "improvement": "shipping",
        "recommendation": 8,
        "comments": "",
    },
    {
        "id": "resp-007",
        "date": "2023-07-11T15:20:00Z",
        "satisfaction": 5,
        "improvement": "product_quality",
        "recommendation": 9,
        "comments": "The quality of your products exceeded my expectations!",
    },
    {
        "id": "resp-008",
        "date": "2023-07-10T11:05:00Z",
        "satisfaction": 3,
        "improvement": "pricing",
        "recommendation": 6,
        "comments": "Good products, but a bit overpriced for what they are.",
    },
    {
        "id": "resp-009",
        "date": "2023-07-09T13:45:00Z",
        "satisfaction": 4,
        "improvement": "website_ux",
        "recommendation": 8,
        "comments": "Overall great experience, but product filters could be improved.",
    },
    {
        "id": "resp-010",
        "date": "2023-07-08T17:30:00Z",
        "satisfaction": 1,
        "improvement": "shipping",
        "recommendation": 2,
        "comments": "My order arrived damaged and customer service was unhelpful.",
    },
]


class SurveyDataSource(abc.ABC):
    @abc.abstractmethod
    async def fetch_summary(self) -> SurveySummary:
        """Fetch the survey summary statistics."""

    @abc.abstractmethod
    async def fetch_responses(self) -> List[SurveyResponse]:
        """Fetch the list of survey responses."""

    @abc.abstractmethod
    async def submit_response(self, submission: SurveySubmission) -> Dict[str, Any]:
        """Submit a validated survey answer set."""


class MockSurveyDataSource(SurveyDataSource):
    def __init__(self, delay_scale: float = 1.0):
        self.delay_scale = max(delay_scale, 0.0)

    async def _simulate_latency(self, seconds: float) -> None:
        if self.delay_scale > 0:
            await asyncio.sleep(seconds * self.delay_scale)

    async def fetch_summary(self) -> SurveySummary:
        await self._simulate_latency(SUMMARY_DELAY)
        return MOCK_SUMMARY

    async def fetch_responses(self) -> List[SurveyResponse]:
        await self._simulate_latency(RESPONSES_DELAY)
        return responses_from_records(MOCK_RESPONSE_RECORDS)

    async def submit_response(self, submission: SurveySubmission) -> Dict[str, Any]:
        await self._simulate_latency(SUBMIT_DELAY)
        logger.info("Survey submitted: %s", submission.to_record())
        return {"success": True}


def create_data_source(settings: Settings) -> SurveyDataSource:
    if settings.data_source == "mock":
        return MockSurveyDataSource(delay_scale=settings.fetch_delay_scale)
    raise RuntimeError(f"Unsupported survey data source: {settings.data_source!r}")
