"""
Filter utilities that apply the response-table filters to survey responses.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from survey_dashboard.data.models import SurveyResponse

logger = logging.getLogger(__name__)

ALL_RATINGS = "all"
RATING_RANGE = range(1, 6)

SatisfactionFilter = Union[str, int, None]


@dataclass
class ResponseFilters:
    satisfaction: SatisfactionFilter = ALL_RATINGS
    search_text: str = ""


DEFAULT_FILTERS = ResponseFilters()


def _matches_all(satisfaction_filter: SatisfactionFilter) -> bool:
    if satisfaction_filter is None:
        return True
    return isinstance(satisfaction_filter, str) and satisfaction_filter.strip().lower() in ("", ALL_RATINGS)


def _parse_rating(satisfaction_filter: SatisfactionFilter) -> Optional[int]:
    """Return the rating a filter selects, or None when it can match nothing."""
    if isinstance(satisfaction_filter, bool):
        return None
    if isinstance(satisfaction_filter, numbers.Integral):
        rating = int(satisfaction_filter)
    elif isinstance(satisfaction_filter, str) and satisfaction_filter.strip().isdigit():
        rating = int(satisfaction_filter.strip())
    else:
        return None
    return rating if rating in RATING_RANGE else None


def _comment_matches(response: SurveyResponse, needle: str) -> bool:
    comments = response.comments if isinstance(response.comments, str) else ""
    return needle in comments.lower()


def filter_responses(
    responses: Sequence[SurveyResponse],
    satisfaction_filter: SatisfactionFilter = ALL_RATINGS,
    search_text: Optional[str] = "",
) -> List[SurveyResponse]:
    """
    Keep responses whose rating equals the selected rating (or any rating when
    the filter is "all") and whose comments contain the search text,
    ignoring case.

    Input order is preserved and the input sequence is never modified.
    Unrecognised rating filters match nothing.
    """
    match_all = _matches_all(satisfaction_filter)
    rating = None if match_all else _parse_rating(satisfaction_filter)
    needle = (search_text or "").lower()

    if not match_all and rating is None:
        logger.debug("Rating filter %r matches no responses", satisfaction_filter)
        return []

    filtered = [
        response
        for response in responses
        if (match_all or response.satisfaction == rating)
        and (not needle or _comment_matches(response, needle))
    ]
    logger.debug(
        "Filtered %d of %d responses (rating=%r, search=%r)",
        len(filtered),
        len(responses),
        satisfaction_filter,
        search_text,
    )
    return filtered


def apply_response_filters(
    responses: Sequence[SurveyResponse], filters: ResponseFilters
) -> List[SurveyResponse]:
    return filter_responses(responses, filters.satisfaction, filters.search_text)


def serialize_filters(filters: ResponseFilters) -> Dict[str, Any]:
    """
    Convert the ResponseFilters dataclass to a JSON-serialisable dictionary for
    logging/debugging.
    """
    satisfaction = filters.satisfaction
    if isinstance(satisfaction, numbers.Integral) and not isinstance(satisfaction, bool):
        satisfaction = int(satisfaction)
    return {
        "satisfaction": satisfaction,
        "search_text": filters.search_text,
    }
