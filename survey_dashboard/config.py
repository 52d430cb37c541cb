"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

import streamlit as st


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "Dashboard"),
    TabConfig("survey_form", "Survey Form"),
    TabConfig("responses", "All Responses"),
]

IMPROVEMENT_LABELS: Dict[str, str] = {
    "product_quality": "Product Quality",
    "pricing": "Pricing",
    "shipping": "Shipping",
    "website_ux": "Website Experience",
    "customer_service": "Customer Service",
}

# Highest rating first, matching the order of the form and the filter select
SATISFACTION_LABELS: Dict[int, str] = {
    5: "Very Satisfied",
    4: "Satisfied",
    3: "Neutral",
    2: "Dissatisfied",
    1: "Very Dissatisfied",
}

DATA_SOURCES = ("mock",)


@dataclass(frozen=True)
class Settings:
    data_source: str = "mock"
    fetch_delay_scale: float = 1.0
    display_timezone: str = "UTC"
    log_level: str = "INFO"


def get_setting(name: str, default: str | None = None) -> str | None:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return default


def _as_float(raw: Optional[str], default: float) -> float:
    try:
        return float(raw) if raw is not None else default
    except ValueError:
        return default


def load_settings() -> Settings:
    """Resolve runtime settings from env vars / secrets with safe fallbacks."""
    data_source = (get_setting("SURVEY_DATA_SOURCE", "mock") or "mock").strip().lower()
    if data_source not in DATA_SOURCES:
        raise RuntimeError(
            f"Unknown SURVEY_DATA_SOURCE {data_source!r}. "
            f"Available sources: {list(DATA_SOURCES)}"
        )
    delay_scale = max(_as_float(get_setting("SURVEY_FETCH_DELAY_SCALE"), 1.0), 0.0)
    return Settings(
        data_source=data_source,
        fetch_delay_scale=delay_scale,
        display_timezone=get_setting("SURVEY_DISPLAY_TIMEZONE", "UTC") or "UTC",
        log_level=(get_setting("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stream handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
