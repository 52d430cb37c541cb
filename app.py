import survey_dashboard.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from survey_dashboard.config import TABS, load_settings
from survey_dashboard.data.loader import clear_cache, load_responses, load_summary
from survey_dashboard.ui.layout import setup_page, sidebar_controls
from survey_dashboard.ui.pages import overview, responses, survey_form
from survey_dashboard.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "overview": overview.render,
    "survey_form": survey_form.render,
    "responses": responses.render,
}


def main() -> None:
    setup_page()
    st.title("Surveylytic Dashboard")
    st.caption("Gather insights from your customers with interactive surveys.")

    if sidebar_controls():
        clear_cache()

    settings = load_settings()
    context = PageContext(
        responses=load_responses(),
        summary=load_summary(),
        settings=settings,
    )

    if not context.responses:
        st.warning("No survey responses yet. Check the configured data source.")

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
