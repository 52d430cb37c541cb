from __future__ import annotations

import logging

import streamlit as st

from survey_dashboard.config import IMPROVEMENT_LABELS, SATISFACTION_LABELS
from survey_dashboard.data.loader import submit_survey
from survey_dashboard.data.submission import SubmissionValidationError, build_submission
from survey_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

SUBMITTED_KEY = "sf_submitted"
RECOMMEND_OPTIONS = [str(v) for v in range(1, 11)]


def _render_thank_you(preview: bool) -> None:
    st.success("Thank you for your feedback!")
    st.write("Your responses help us improve our products and services.")
    if not preview and st.button("Submit another response", key="sf_again"):
        st.session_state[SUBMITTED_KEY] = False
        st.rerun()


def render(context: PageContext) -> None:
    st.subheader("Cart Page Survey Preview")
    st.caption("This is how the survey will appear to customers on your cart page.")
    preview = st.toggle("Preview mode", value=True, key="sf_preview", help="Submissions are not processed in preview mode.")

    if st.session_state.get(SUBMITTED_KEY):
        _render_thank_you(preview)
        return

    with st.form("survey_form", clear_on_submit=False):
        st.markdown("##### We value your feedback!")
        st.caption("Please take a moment to complete this quick survey about your shopping experience.")
        satisfaction = st.radio(
            "How satisfied are you with your shopping experience today?",
            options=[str(r) for r in SATISFACTION_LABELS],
            format_func=lambda v: SATISFACTION_LABELS[int(v)],
            index=None,
            key="sf_satisfaction",
        )
        improvements = st.selectbox(
            "What area do you think we could improve the most?",
            options=list(IMPROVEMENT_LABELS),
            format_func=IMPROVEMENT_LABELS.get,
            index=None,
            placeholder="Select an area",
            key="sf_improvements",
        )
        likely_to_recommend = st.radio(
            "How likely are you to recommend us to a friend?",
            options=RECOMMEND_OPTIONS,
            index=None,
            horizontal=True,
            key="sf_recommend",
            help="1 = Not likely, 10 = Very likely",
        )
        comments = st.text_area(
            "Any additional comments or suggestions?",
            placeholder="Tell us what you think...",
            key="sf_comments",
        )
        submitted = st.form_submit_button("Submit Survey")

    if not submitted:
        return

    values = {
        "satisfaction": satisfaction,
        "improvements": improvements,
        "likely_to_recommend": likely_to_recommend,
        "comments": comments,
    }
    try:
        submission = build_submission(values)
    except SubmissionValidationError as exc:
        for message in exc.errors.values():
            st.error(message)
        return

    if preview:
        st.info("In preview mode, survey submissions are not processed.")
        return

    with st.spinner("Submitting"):
        result = submit_survey(submission)
    if result.get("success"):
        st.toast("Survey submitted. Thank you for your feedback!", icon="✅")
        st.session_state[SUBMITTED_KEY] = True
        st.rerun()
    else:
        logger.warning("Survey submission was not acknowledged: %s", result)
        st.error("We could not submit your survey. Please try again.")
