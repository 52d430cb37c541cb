import pytest

from survey_dashboard.data import submission
from survey_dashboard.data.models import SurveySubmission


def _complete_values(**overrides):
    values = {
        "satisfaction": "5",
        "improvements": "shipping",
        "likely_to_recommend": "9",
        "comments": "Quick delivery",
    }
    values.update(overrides)
    return values


def test_complete_answers_have_no_errors():
    assert submission.validate_submission(_complete_values()) == {}


def test_empty_form_reports_every_required_field():
    errors = submission.validate_submission({})

    assert errors == {
        "satisfaction": "Please select your satisfaction level",
        "improvements": "Please select an area for improvement",
        "likely_to_recommend": "Please select how likely you are to recommend",
    }


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_required_value_is_an_error(blank):
    errors = submission.validate_submission(_complete_values(improvements=blank))

    assert list(errors) == ["improvements"]


def test_comments_are_optional():
    assert submission.validate_submission(_complete_values(comments=None)) == {}


def test_build_submission_maps_form_fields():
    result = submission.build_submission(_complete_values(comments="  thanks  "))

    assert result == SurveySubmission(
        satisfaction="5",
        improvement="shipping",
        recommendation="9",
        comments="thanks",
    )


def test_build_submission_raises_with_field_errors():
    with pytest.raises(submission.SubmissionValidationError) as exc_info:
        submission.build_submission(_complete_values(satisfaction=""))

    assert exc_info.value.errors == {"satisfaction": "Please select your satisfaction level"}
    assert isinstance(exc_info.value, ValueError)
