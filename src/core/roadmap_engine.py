# src/core/roadmap_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from src.config import settings
from src.core.formatting import format_currency
from src.core.overlays import DetailField, Overlay
from src.core.roadmap_models import RoadmapPhase


@dataclass(frozen=True)
class BarGeometry:
    """Horizontal placement of a timeline bar, as % of the timeline width."""

    left_pct: float
    width_pct: float


@dataclass(frozen=True)
class YearSeries:
    """One stacked-bar series: 0/1 activity of every phase in a single year."""

    year: int
    label: str
    values: List[int]


def roadmap_years() -> List[int]:
    return list(range(settings.ROADMAP_FIRST_YEAR, settings.ROADMAP_LAST_YEAR + 1))


def is_phase_active(phase: RoadmapPhase, year: int) -> bool:
    """True when `year` falls inside the phase's inclusive interval."""
    return phase.start_year <= year <= phase.end_year


def build_activity_matrix(
    phases: Sequence[RoadmapPhase],
    years: Iterable[int] | None = None,
) -> pd.DataFrame:
    """
    Phase-major activity matrix.

    Index is the phase name, columns are the project years, cells are
    booleans computed with the inclusive interval test.
    """
    year_list = list(years) if years is not None else roadmap_years()
    year_arr = np.asarray(year_list, dtype=int)

    rows = [
        (year_arr >= phase.start_year) & (year_arr <= phase.end_year)
        for phase in phases
    ]
    data = np.vstack(rows) if rows else np.zeros((0, len(year_list)), dtype=bool)

    matrix = pd.DataFrame(
        data,
        index=pd.Index([p.name for p in phases], name="phase"),
        columns=pd.Index(year_list, name="year"),
    )
    return matrix.astype(bool)


def build_year_series(
    phases: Sequence[RoadmapPhase],
    years: Iterable[int] | None = None,
) -> List[YearSeries]:
    """
    Year-major view of the activity matrix for the stacked bar chart:
    one series per year, with a 0/1 value per phase row.
    """
    matrix = build_activity_matrix(phases, years)
    return [
        YearSeries(
            year=int(year),
            label=f"Year {year}",
            values=matrix[year].astype(int).tolist(),
        )
        for year in matrix.columns
    ]


def activity_long_frame(phases: Sequence[RoadmapPhase]) -> pd.DataFrame:
    """
    Tidy (phase, year, active) rows for grid charts and tables.
    """
    matrix = build_activity_matrix(phases)
    long_df = matrix.reset_index().melt(
        id_vars="phase", var_name="year", value_name="active"
    )
    long_df["year"] = long_df["year"].astype(int)
    long_df["active"] = long_df["active"].astype(bool)
    return long_df


def timeline_bar_geometry(phase: RoadmapPhase) -> BarGeometry:
    """
    Each project year owns an equal slice of the timeline width
    (5% for 20 years); a bar covers the slices of its inclusive range.
    """
    n_years = settings.ROADMAP_LAST_YEAR - settings.ROADMAP_FIRST_YEAR + 1
    offset = phase.start_year - settings.ROADMAP_FIRST_YEAR
    return BarGeometry(
        left_pct=offset / n_years * 100.0,
        width_pct=phase.duration_years / n_years * 100.0,
    )


def phase_tooltip(phase: RoadmapPhase) -> Overlay:
    return Overlay(
        kind="tooltip",
        title=phase.name,
        fields=[
            DetailField("Duration", f"Year {phase.start_year} - {phase.end_year}"),
            DetailField("Cost", format_currency(phase.cost)),
            DetailField("Revenue Impact", format_currency(phase.revenue_impact)),
            DetailField("Description", phase.description),
        ],
        source_id=phase.name,
    )


def phase_modal(phase: RoadmapPhase) -> Overlay:
    """
    Detail panel for a clicked phase. Unlike the hover tooltip it also
    reports the net impact (revenue impact minus cost).
    """
    return Overlay(
        kind="modal",
        title=phase.name,
        fields=[
            DetailField(
                "Timeline",
                f"Year {phase.start_year} - Year {phase.end_year} "
                f"({phase.duration_years} years)",
            ),
            DetailField("Total Cost", format_currency(phase.cost)),
            DetailField("Revenue Impact", format_currency(phase.revenue_impact)),
            DetailField("Net Impact", format_currency(phase.net_impact)),
        ],
        body=phase.description,
        source_id=phase.name,
    )


def phase_chart_hover_lines(phase: RoadmapPhase) -> List[str]:
    """Extra hover lines shown under "Year N active" in the stacked bar chart."""
    return [
        f"Duration: Year {phase.start_year}-{phase.end_year}",
        f"Cost: {format_currency(phase.cost)}",
        f"Revenue Impact: {format_currency(phase.revenue_impact)}",
        f"Description: {phase.description}",
    ]


def phases_to_dataframe(phases: Sequence[RoadmapPhase]) -> pd.DataFrame:
    rows = [
        {
            "Phase": p.name,
            "Start year": p.start_year,
            "End year": p.end_year,
            "Years": p.duration_years,
            "Cost": format_currency(p.cost),
            "Revenue impact": format_currency(p.revenue_impact),
            "Net impact": format_currency(p.net_impact),
        }
        for p in phases
    ]
    return pd.DataFrame(rows)
