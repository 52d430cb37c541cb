from __future__ import annotations

import pandas as pd
import streamlit as st

from survey_dashboard.data.summary import net_promoter_score, summarize_responses
from survey_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from survey_dashboard.ui.pages.context import PageContext
from survey_dashboard.utils.formatting import format_number, improvement_label, satisfaction_label


def _kpis(context: PageContext) -> list[KpiCard]:
    upstream = context.summary
    computed = summarize_responses(context.responses)
    total = computed.total_responses or upstream.total_responses
    average = computed.average_satisfaction
    if average is None:
        average = upstream.average_satisfaction
    nps = net_promoter_score(context.responses)
    return [
        KpiCard(
            label="Total Responses",
            value=total,
            description=f"{format_number(upstream.total_responses)} recorded overall",
        ),
        KpiCard(
            label="Completion Rate",
            value_display=upstream.completion_rate or "N/A",
            description="Of customers who started the survey",
        ),
        KpiCard(label="Average Satisfaction", value=average, decimals=1, description="Out of 5 stars"),
        KpiCard(
            label="Net Promoter Score",
            value_display=format_number(nps, 0) if nps is not None else "N/A",
            description="Promoters (9-10) minus detractors (0-6)",
        ),
    ]


def render(context: PageContext) -> None:
    st.subheader("Dashboard")
    render_kpi_cards(_kpis(context), columns=4)

    computed = summarize_responses(context.responses)
    col_sat, col_imp = st.columns(2)
    with col_sat:
        st.markdown("#### Customer Satisfaction")
        st.caption("Distribution of satisfaction ratings")
        st.dataframe(
            pd.DataFrame(
                [(satisfaction_label(r), n) for r, n in computed.satisfaction_distribution],
                columns=["Rating", "Responses"],
            ),
            use_container_width=True,
            hide_index=True,
        )
    with col_imp:
        st.markdown("#### Areas for Improvement")
        st.caption("What customers want us to improve")
        st.dataframe(
            pd.DataFrame(
                [(improvement_label(code), n) for code, n in computed.improvements],
                columns=["Area", "Responses"],
            ),
            use_container_width=True,
            hide_index=True,
        )

    st.markdown("#### Responses by Day")
    st.dataframe(
        pd.DataFrame(computed.responses_by_day, columns=["Day", "Responses"]).set_index("Day").T,
        use_container_width=True,
    )
