# src/ui/charts.py
from __future__ import annotations

import logging
from typing import Sequence

import altair as alt
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.config import settings
from src.core.roadmap_engine import (
    activity_long_frame,
    build_year_series,
    phase_chart_hover_lines,
)
from src.core.roadmap_models import RoadmapPhase
from src.core.scenario_config import default_scenario, get_scenario
from src.core.scenario_models import Scenario
from src.ui import style

logger = logging.getLogger(__name__)

# (label, Scenario attribute) in trace order
FINANCIAL_SERIES = (
    ("Revenue", "revenue"),
    ("Operating Costs", "costs"),
    ("Gross Profit", "gross_profit"),
    ("Cumulative Debt", "cumulative_debt"),
)


def _financial_trace(label: str, scenario: Scenario, attr: str) -> go.Scatter:
    line_styles = {
        "revenue": (style.COLOR_REVENUE, style.LINE_WIDTH_PRIMARY, style.FILL_REVENUE),
        "costs": (style.COLOR_COSTS, style.LINE_WIDTH_SECONDARY, style.FILL_COSTS),
        "gross_profit": (
            style.COLOR_GROSS_PROFIT,
            style.LINE_WIDTH_SECONDARY,
            style.FILL_GROSS_PROFIT,
        ),
        "cumulative_debt": (style.COLOR_DEBT, style.LINE_WIDTH_SECONDARY, None),
    }
    color, width, fill_color = line_styles[attr]
    marker_size = (
        style.MARKER_SIZE_PRIMARY if attr == "revenue" else style.MARKER_SIZE_SECONDARY
    )

    return go.Scatter(
        x=scenario.years,
        y=getattr(scenario, attr),
        mode="lines+markers",
        name=label,
        line=dict(
            color=color,
            width=width,
            shape="spline",
            dash="dash" if attr == "cumulative_debt" else "solid",
        ),
        marker=dict(color=color, size=marker_size, line=dict(color="#fff", width=2)),
        fill="tozeroy" if fill_color else None,
        fillcolor=fill_color,
        hovertemplate=f"{label}: $%{{y:.0f}}M<extra></extra>",
    )


class FinancialChart:
    """
    Owns the multi-series financial projection figure.

    Built from the default scenario; `swap_scenario` replaces the data of
    all four series in place so the figure object (and its layout) stays
    the same across selections.
    """

    def __init__(self, scenario: Scenario | None = None) -> None:
        self.scenario = scenario or default_scenario()
        self.figure = self._build_figure(self.scenario)

    @staticmethod
    def _build_figure(scenario: Scenario) -> go.Figure:
        fig = go.Figure()
        for label, attr in FINANCIAL_SERIES:
            fig.add_trace(_financial_trace(label, scenario, attr))

        fig.update_layout(
            hovermode="x unified",
            legend=dict(
                orientation="h",
                yanchor="bottom",
                y=1.02,
                xanchor="center",
                x=0.5,
                font=dict(size=12, color="#333"),
            ),
            yaxis=dict(
                title=settings.FINANCIAL_AXIS_TITLE,
                tickprefix="$",
                ticksuffix="M",
                tickfont=dict(color=style.COLOR_NEUTRAL),
                gridcolor=style.GRID_COLOR,
                rangemode="normal",
            ),
            xaxis=dict(
                title=None,
                showgrid=False,
                tickfont=dict(color=style.COLOR_NEUTRAL),
            ),
            margin=dict(l=60, r=20, t=60, b=40),
        )
        return fig

    def swap_scenario(self, key: object) -> bool:
        """
        Point every series at another scenario's data.

        Unknown keys leave the chart untouched and return False.
        """
        scenario = get_scenario(key)
        if scenario is None:
            logger.debug("Scenario %r not found; chart left unchanged", key)
            return False

        for trace, (_, attr) in zip(self.figure.data, FINANCIAL_SERIES):
            trace.x = scenario.years
            trace.y = getattr(scenario, attr)

        self.scenario = scenario
        return True

    def render(self) -> None:
        st.plotly_chart(self.figure, width="stretch")


def build_roadmap_figure(phases: Sequence[RoadmapPhase]) -> go.Figure:
    """
    Horizontal stacked bars: one single-year series per project year, each
    contributing 0/1 per phase row, so a phase's bar length is its number
    of active years.
    """
    phase_names = [p.name for p in phases]
    customdata = [["<br>".join(phase_chart_hover_lines(p))] for p in phases]
    palette = style.ROADMAP_YEAR_COLORS

    fig = go.Figure()
    for index, series in enumerate(build_year_series(phases)):
        fig.add_trace(
            go.Bar(
                x=series.values,
                y=phase_names,
                orientation="h",
                name=series.label,
                marker=dict(
                    color=palette[index % len(palette)],
                    line=dict(color=style.COLOR_PRIMARY, width=1),
                ),
                customdata=customdata,
                hovertemplate=(
                    "<b>%{y}</b><br>"
                    f"Year {series.year} active<br><br>"
                    "%{customdata[0]}<extra></extra>"
                ),
            )
        )

    fig.update_layout(
        barmode="stack",
        title=dict(text=settings.ROADMAP_TITLE, font=dict(size=16)),
        xaxis=dict(
            title="Project Years",
            range=[0, settings.ROADMAP_LAST_YEAR],
            dtick=1,
        ),
        yaxis=dict(title="Project Phases", autorange="reversed"),
        hoverlabel=dict(bgcolor=style.ROADMAP_HOVER_BG, font=dict(color="#fff")),
        legend=dict(orientation="h", yanchor="top", y=-0.2, font=dict(size=11)),
        margin=dict(l=40, r=20, t=70, b=40),
    )
    return fig


def build_activity_grid_chart(phases: Sequence[RoadmapPhase]) -> alt.Chart:
    """Year x phase grid of active years, in phase display order."""
    grid_df = activity_long_frame(phases)
    grid_df["status"] = grid_df["active"].map({True: "Active", False: "Inactive"})

    return (
        alt.Chart(grid_df)
        .mark_rect(stroke="white", strokeWidth=1)
        .encode(
            x=alt.X("year:O", title="Project year"),
            y=alt.Y("phase:N", title=None, sort=[p.name for p in phases]),
            color=alt.Color(
                "status:N",
                title=None,
                scale=alt.Scale(
                    domain=["Active", "Inactive"],
                    range=[style.COLOR_SECONDARY, style.COLOR_BACKGROUND],
                ),
            ),
            tooltip=[
                alt.Tooltip("phase:N", title="Phase"),
                alt.Tooltip("year:O", title="Year"),
                alt.Tooltip("status:N", title="Status"),
            ],
        )
        .properties(height=40 * max(len(phases), 1))
    )


def render_roadmap_chart(phases: Sequence[RoadmapPhase]) -> None:
    st.plotly_chart(build_roadmap_figure(phases), width="stretch")


def render_activity_grid(phases: Sequence[RoadmapPhase]) -> None:
    st.altair_chart(build_activity_grid_chart(phases), width="stretch")


def scenario_to_dataframe(scenario: Scenario) -> pd.DataFrame:
    data = {"Year": scenario.years}
    for label, attr in FINANCIAL_SERIES:
        data[f"{label} ($M)"] = getattr(scenario, attr)
    return pd.DataFrame(data)
