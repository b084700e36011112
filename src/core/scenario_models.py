# src/core/scenario_models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Scenario:
    """
    One market-capture projection with a fixed 20-year trajectory.

    All monetary series are in CAD $ millions and are parallel to
    `years`. `gross_profit` is derived by the scenario factory in
    src/data/scenarios.py and never recomputed afterwards.
    """

    key: int  # market capture %, e.g. 75
    name: str
    years: List[str]

    revenue: List[float]
    costs: List[float]
    gross_profit: List[float]
    cumulative_debt: List[float]


@dataclass(frozen=True)
class ScenarioMetrics:
    """
    Headline metrics for the selected scenario.
    """

    total_revenue: float
    total_costs: float
    net_profit: float
    roi: Optional[float]  # % with one decimal; None when total_costs == 0
