# src/ui/roadmap.py
from __future__ import annotations

import html
import json
from typing import Sequence

import streamlit as st
import streamlit.components.v1 as components

from src.config import settings
from src.core.overlays import Overlay, OverlayManager
from src.core.roadmap_engine import (
    phase_modal,
    phase_tooltip,
    phases_to_dataframe,
    roadmap_years,
    timeline_bar_geometry,
)
from src.core.roadmap_models import RoadmapPhase
from src.data.roadmap import ROADMAP_PHASES
from src.ui import style
from src.ui.anchors import Anchors, resolve_anchor
from src.ui.charts import render_activity_grid, render_roadmap_chart
from src.ui.overlay_panels import (
    get_overlay_manager,
    open_modal_dialog,
    render_overlay_panel,
    reset_stale_modal,
)

ROADMAP_WIDGET = "roadmap"

TIMELINE_CSS = f"""
<style>
body {{ margin: 0; font-family: "Source Sans Pro", Arial, sans-serif; }}
.timeline-container {{ border: 1px solid #e5e7eb; border-radius: 8px; overflow: hidden; }}
.timeline-header, .timeline-row {{ display: flex; align-items: center; }}
.timeline-header {{ background: {style.COLOR_PRIMARY}; color: white; height: {settings.TIMELINE_HEADER_HEIGHT_PX}px; }}
.timeline-phase-names, .timeline-phase-name {{ width: 180px; flex-shrink: 0; padding: 0 10px; font-size: 13px; }}
.timeline-years {{ flex: 1; display: flex; }}
.year-label {{ flex: 1; text-align: center; font-size: 10px; }}
.timeline-row {{ height: {settings.TIMELINE_ROW_HEIGHT_PX}px; border-top: 1px solid #eef2ef; }}
.timeline-bars {{ flex: 1; height: 100%; position: relative; }}
.timeline-bar-container {{ position: absolute; inset: 10px 0; }}
.timeline-bar {{
    position: absolute; top: 0; bottom: 0; border-radius: 4px; cursor: pointer;
    background: linear-gradient(90deg, {style.COLOR_SECONDARY}, {style.COLOR_ACCENT});
}}
.timeline-bar:hover {{ filter: brightness(1.1); }}
.phase-tooltip {{
    position: fixed; z-index: 1000; transform: translate(-50%, -100%);
    background: {style.ROADMAP_HOVER_BG}; color: white; padding: 10px 12px;
    border-radius: 6px; font-size: 12px; max-width: 280px; pointer-events: none;
}}
.phase-tooltip p {{ margin: 4px 0; }}
.tooltip-title {{ font-weight: bold; font-size: 13px; }}
.phase-modal {{
    position: fixed; inset: 0; background: rgba(0, 0, 0, 0.6); z-index: 2000;
    display: flex; align-items: center; justify-content: center;
}}
.modal-content {{
    background: white; border-radius: 12px; padding: 24px 28px; max-width: 520px;
    position: relative; color: #333;
}}
.modal-content h2 {{ color: {style.COLOR_PRIMARY}; margin-top: 0; }}
.modal-close {{
    position: absolute; top: 10px; right: 14px; border: none; background: none;
    font-size: 26px; color: {style.COLOR_PRIMARY}; cursor: pointer;
}}
.detail-row {{ display: flex; justify-content: space-between; padding: 6px 0; border-bottom: 1px solid #eef2ef; }}
.detail-label {{ font-weight: 600; color: {style.COLOR_PRIMARY}; }}
</style>
"""

# Exactly one .phase-tooltip may exist: showTooltip removes any prior one.
TIMELINE_SCRIPT = """
<script>
const phaseDetails = __PHASE_DETAILS__;

function removeHoverTooltip() {
    const existing = document.querySelector('.phase-tooltip');
    if (existing) { existing.remove(); }
}

function fieldsHtml(fields, tag) {
    return fields.map(f => tag === 'p'
        ? `<p><strong>${f.label}:</strong> ${f.value}</p>`
        : `<div class="detail-row"><span class="detail-label">${f.label}:</span>`
          + `<span class="detail-value">${f.value}</span></div>`).join('');
}

function showHoverTooltip(index, element) {
    removeHoverTooltip();
    const tip = phaseDetails[index].tooltip;
    const tooltip = document.createElement('div');
    tooltip.className = 'phase-tooltip';
    tooltip.innerHTML = `<div class="tooltip-title">${tip.title}</div>`
        + `<div class="tooltip-content">${fieldsHtml(tip.fields, 'p')}</div>`;
    document.body.appendChild(tooltip);
    const rect = element.getBoundingClientRect();
    tooltip.style.left = (rect.left + rect.width / 2) + 'px';
    tooltip.style.top = Math.max(rect.top - 10, tooltip.offsetHeight) + 'px';
}

function showPhaseDetails(index) {
    removeHoverTooltip();
    const existing = document.querySelector('.phase-modal');
    if (existing) { existing.remove(); }
    const detail = phaseDetails[index].modal;
    const modal = document.createElement('div');
    modal.className = 'phase-modal';
    modal.innerHTML = `<div class="modal-content">`
        + `<button class="modal-close">&times;</button>`
        + `<h2>${detail.title}</h2>`
        + `<div class="modal-details">${fieldsHtml(detail.fields, 'row')}`
        + `<div class="detail-section"><p>${detail.body}</p></div></div></div>`;
    document.body.appendChild(modal);
    modal.querySelector('.modal-close').addEventListener('click', () => modal.remove());
    modal.addEventListener('click', (e) => { if (e.target === modal) modal.remove(); });
}

document.querySelectorAll('.timeline-bar').forEach(bar => {
    const index = parseInt(bar.dataset.phaseIndex);
    bar.addEventListener('click', (e) => { e.stopPropagation(); showPhaseDetails(index); });
    bar.addEventListener('mouseenter', () => showHoverTooltip(index, bar));
    bar.addEventListener('mouseleave', removeHoverTooltip);
});
</script>
"""


def _overlay_payload(overlay: Overlay) -> dict:
    return {
        "title": html.escape(overlay.title),
        "fields": [
            {"label": html.escape(f.label), "value": html.escape(f.value)}
            for f in overlay.fields
        ],
        "body": html.escape(overlay.body),
    }


def _timeline_row(index: int, phase: RoadmapPhase) -> str:
    geometry = timeline_bar_geometry(phase)
    name = html.escape(phase.name)
    return (
        f'<div class="timeline-row" data-phase="{name}">'
        f'<div class="timeline-phase-name">{name}</div>'
        '<div class="timeline-bars"><div class="timeline-bar-container">'
        f'<div class="timeline-bar" style="left: {geometry.left_pct:g}%; '
        f'width: {geometry.width_pct:g}%;" data-phase-index="{index}" '
        'title="Click for details"></div>'
        "</div></div></div>"
    )


def build_timeline_html(phases: Sequence[RoadmapPhase]) -> str:
    """
    Self-contained HTML timeline: one percentage-positioned bar per phase,
    with a hover tooltip and a click modal built from the phase overlays.
    """
    year_labels = "".join(
        f'<div class="year-label">Year {year}</div>' for year in roadmap_years()
    )
    rows = "".join(_timeline_row(i, phase) for i, phase in enumerate(phases))
    details = [
        {
            "tooltip": _overlay_payload(phase_tooltip(phase)),
            "modal": _overlay_payload(phase_modal(phase)),
        }
        for phase in phases
    ]

    return (
        TIMELINE_CSS
        + '<div class="timeline-container">'
        + '<div class="timeline-header">'
        + '<div class="timeline-phase-names"><div class="phase-label">Phases</div></div>'
        + f'<div class="timeline-years">{year_labels}</div>'
        + "</div>"
        + f'<div class="timeline-rows">{rows}</div>'
        + "</div>"
        + TIMELINE_SCRIPT.replace("__PHASE_DETAILS__", json.dumps(details))
    )


def timeline_height_px(n_phases: int) -> int:
    # Extra room so the modal fits inside the component iframe
    return max(
        settings.TIMELINE_HEADER_HEIGHT_PX
        + n_phases * settings.TIMELINE_ROW_HEIGHT_PX
        + 40,
        420,
    )


@st.dialog("Phase details", width="large")
def _phase_dialog(manager: OverlayManager) -> None:
    overlay = manager.modal
    if overlay is None:
        return
    st.subheader(overlay.title)
    render_overlay_panel(overlay, body_heading="Description")
    if st.button("Close", key="close_phase_dialog"):
        manager.close_modal()
        st.rerun()


def render_roadmap_section(anchors: Anchors) -> None:
    """
    20-year roadmap: stacked bar chart, interactive timeline and the
    active-year grid.
    """
    container = resolve_anchor(anchors, settings.ANCHOR_ROADMAP)
    if container is None:
        return

    manager = get_overlay_manager(ROADMAP_WIDGET)
    reset_stale_modal(manager)
    phases = ROADMAP_PHASES

    with container:
        st.header("20-year roadmap")

        render_roadmap_chart(phases)

        st.markdown("#### Timeline")
        st.caption("Hover a bar for a summary; click it for the full breakdown.")
        components.html(
            build_timeline_html(phases),
            height=timeline_height_px(len(phases)),
            scrolling=False,
        )

        col_select, col_button = st.columns([3, 1], vertical_alignment="bottom")
        with col_select:
            phase_name = st.selectbox(
                "Phase details",
                options=[p.name for p in phases],
            )
        with col_button:
            if st.button("Open details", width="stretch"):
                phase = next(p for p in phases if p.name == phase_name)
                open_modal_dialog(manager, phase_modal(phase), _phase_dialog)

        with st.expander("Active years by phase", expanded=False):
            render_activity_grid(phases)
            st.dataframe(
                phases_to_dataframe(phases),
                width="stretch",
                hide_index=True,
            )
