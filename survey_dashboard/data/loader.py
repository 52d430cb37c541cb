import asyncio
import logging
from typing import Any, Dict, List

import streamlit as st

from survey_dashboard.config import Settings, load_settings
from survey_dashboard.data.models import SurveyResponse, SurveySubmission, SurveySummary
from survey_dashboard.data.source import SurveyDataSource, create_data_source

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _get_source_impl(data_source: str, delay_scale: float) -> SurveyDataSource:
    logger.info("Using %s survey data source (delay scale %.2f)", data_source, delay_scale)
    return create_data_source(Settings(data_source=data_source, fetch_delay_scale=delay_scale))


def get_data_source() -> SurveyDataSource:
    """Wrapper that resolves config and returns the shared data source."""
    settings = load_settings()
    # Explicit params for proper cache keying
    return _get_source_impl(settings.data_source, settings.fetch_delay_scale)


@st.cache_data(show_spinner="Loading survey summary...", ttl=600)
def _load_summary_impl(data_source: str, delay_scale: float) -> SurveySummary:
    summary = asyncio.run(_get_source_impl(data_source, delay_scale).fetch_summary())
    logger.info("Loaded survey summary (%d total responses)", summary.total_responses)
    return summary


@st.cache_data(show_spinner="Loading survey responses...", ttl=600)
def _load_responses_impl(data_source: str, delay_scale: float) -> List[SurveyResponse]:
    responses = asyncio.run(_get_source_impl(data_source, delay_scale).fetch_responses())
    logger.info("Loaded %d survey responses", len(responses))
    return responses


def load_summary() -> SurveySummary:
    settings = load_settings()
    return _load_summary_impl(settings.data_source, settings.fetch_delay_scale)


def load_responses() -> List[SurveyResponse]:
    settings = load_settings()
    return _load_responses_impl(settings.data_source, settings.fetch_delay_scale)


def clear_cache() -> None:
    _load_summary_impl.clear()  # type: ignore[attr-defined]
    _load_responses_impl.clear()  # type: ignore[attr-defined]


def submit_survey(submission: SurveySubmission) -> Dict[str, Any]:
    return asyncio.run(get_data_source().submit_response(submission))
