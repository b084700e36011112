# src/ui/layout.py
from __future__ import annotations

import logging

import streamlit as st

from src.config import settings
from src.config.version import APP_VERSION, PROJECT_NAME
from src.core.scenario_config import parse_scenario_key
from src.data.facilities import get_all_markers
from src.data.roadmap import ROADMAP_PHASES
from src.data.scenarios import FINANCIAL_SCENARIOS
from src.ui.anchors import build_page_anchors
from src.ui.financials import SCENARIO_SELECT_KEY, render_financial_section
from src.ui.infrastructure_map import render_infrastructure_map_section
from src.ui.pdf_export import build_briefing_pdf
from src.ui.roadmap import render_roadmap_section

logger = logging.getLogger(__name__)

SECTION_RENDERERS = (
    render_financial_section,
    render_infrastructure_map_section,
    render_roadmap_section,
)


def render_sidebar() -> None:
    st.sidebar.markdown(f"### {PROJECT_NAME}")
    st.sidebar.caption(
        "Refinery, storage and export infrastructure for Newfoundland, with a "
        "20-year financial outlook."
    )

    selected_key = parse_scenario_key(
        st.session_state.get(SCENARIO_SELECT_KEY, settings.DEFAULT_SCENARIO_KEY)
    )
    pdf_bytes = build_briefing_pdf(
        scenarios=list(FINANCIAL_SCENARIOS.values()),
        phases=ROADMAP_PHASES,
        facilities=get_all_markers(),
        selected_key=selected_key,
    )
    st.sidebar.download_button(
        "Download briefing (PDF)",
        data=pdf_bytes,
        file_name="newfoundland_energy_briefing.pdf",
        mime="application/pdf",
    )


def render_footer() -> None:
    st.markdown("---")
    st.caption(
        f"{PROJECT_NAME} · v{APP_VERSION} · Figures are indicative projections, "
        "not forecasts."
    )


def render_dashboard() -> None:
    st.title(PROJECT_NAME)
    st.caption("Financial scenarios, energy infrastructure and the 20-year roadmap.")

    render_sidebar()

    anchors = build_page_anchors()
    logger.debug("Rendering dashboard sections: %s", ", ".join(anchors) or "none")

    # Widgets share no state; a missing anchor only skips its own widget.
    for render_section in SECTION_RENDERERS:
        render_section(anchors)

    render_footer()
