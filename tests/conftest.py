import pytest

from survey_dashboard.data.models import SurveyResponse, responses_from_records
from survey_dashboard.data.source import MOCK_RESPONSE_RECORDS

SETTING_VARS = [
    "SURVEY_DATA_SOURCE",
    "SURVEY_FETCH_DELAY_SCALE",
    "SURVEY_DISPLAY_TIMEZONE",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clear_settings_env(monkeypatch):
    """Tests start from default settings regardless of the developer's shell."""
    for name in SETTING_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_responses():
    return responses_from_records(MOCK_RESPONSE_RECORDS)


@pytest.fixture
def make_response():
    def _make(**overrides):
        fields = {
            "id": "resp-x",
            "date": "2024-03-01T09:00:00Z",
            "satisfaction": 4,
            "improvement": "pricing",
            "recommendation": 8,
            "comments": "",
        }
        fields.update(overrides)
        return SurveyResponse(**fields)

    return _make
