from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from survey_dashboard.utils.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    decimals: int = 0
    description: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    return format_number(card.value, decimals=card.decimals)


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 4) -> None:
    """
    Render stat cards in a grid of Streamlit columns, each with an optional
    caption underneath.
    """
    cards = list(cards)
    if not cards:
        st.info("No survey statistics available yet.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        for col, card in zip(st.columns(len(row_cards)), row_cards):
            with col:
                st.metric(label=card.label, value=_format_value(card))
                if card.description:
                    st.caption(card.description)
