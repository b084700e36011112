# src/ui/financials.py
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List

import streamlit as st

from src.config import settings
from src.core.formatting import format_millions, format_percentage
from src.core.scenario_config import get_scenario, parse_scenario_key
from src.core.scenario_finance import calculate_scenario_metrics, sign_color
from src.core.scenario_models import ScenarioMetrics
from src.data.scenarios import FINANCIAL_SCENARIOS
from src.ui.anchors import Anchors, resolve_anchor
from src.ui.charts import FinancialChart, scenario_to_dataframe
from src.ui.style import COLOR_PRIMARY

SCENARIO_SELECT_KEY = "scenarioSelect"


@dataclass(frozen=True)
class MetricSlot:
    slot_id: str
    label: str
    text: str
    color: str


def build_metric_slots(metrics: ScenarioMetrics) -> List[MetricSlot]:
    """
    The four headline output slots. Net profit and ROI are coloured by
    the sign of the underlying number, not of the formatted string.
    """
    return [
        MetricSlot(
            "totalRevenue",
            "Total Revenue",
            format_millions(metrics.total_revenue),
            COLOR_PRIMARY,
        ),
        MetricSlot(
            "totalCosts",
            "Total Costs",
            format_millions(metrics.total_costs),
            COLOR_PRIMARY,
        ),
        MetricSlot(
            "netProfit",
            "Net Profit",
            format_millions(metrics.net_profit),
            sign_color(metrics.net_profit),
        ),
        MetricSlot(
            "roi",
            "ROI",
            format_percentage(metrics.roi, settings.ROI_DECIMALS),
            sign_color(metrics.roi),
        ),
    ]


def _metric_html(slot: MetricSlot) -> str:
    return (
        f'<div id="{slot.slot_id}" style="padding:0.5rem 0;">'
        f'<div style="font-size:0.875rem;font-weight:600;color:#555;">'
        f"{html.escape(slot.label)}</div>"
        f'<div style="font-size:1.6rem;font-weight:700;color:{slot.color};">'
        f"{html.escape(slot.text)}</div>"
        "</div>"
    )


def render_metric_slots(slots: List[MetricSlot]) -> None:
    cols = st.columns(len(slots))
    for col, slot in zip(cols, slots):
        with col:
            st.markdown(_metric_html(slot), unsafe_allow_html=True)


def _scenario_label(key: str) -> str:
    scenario = get_scenario(key)
    return scenario.name if scenario is not None else key


def render_financial_section(anchors: Anchors) -> None:
    """
    Financial projections: scenario selector, projection chart and the
    four headline metrics.
    """
    container = resolve_anchor(anchors, settings.ANCHOR_FINANCIAL_CHART)
    if container is None:
        return

    with container:
        st.header("Financial projections")
        st.caption(
            "20-year projections under three market-capture scenarios "
            "(CAD $ millions)."
        )

        options = [str(key) for key in FINANCIAL_SCENARIOS]
        selected = st.selectbox(
            "Market capture scenario",
            options=options,
            index=options.index(str(settings.DEFAULT_SCENARIO_KEY)),
            format_func=_scenario_label,
            key=SCENARIO_SELECT_KEY,
        )

        chart = FinancialChart()
        key = parse_scenario_key(selected)
        if key is not None and key != chart.scenario.key:
            chart.swap_scenario(key)

        chart.render()

        metrics = calculate_scenario_metrics(chart.scenario)
        render_metric_slots(build_metric_slots(metrics))

        with st.expander(
            "Per-year projection table",
            expanded=settings.SHOW_DATA_TABLES_EXPANDED,
        ):
            st.dataframe(
                scenario_to_dataframe(chart.scenario),
                width="stretch",
                hide_index=True,
            )
