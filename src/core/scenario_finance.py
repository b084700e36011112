# src/core/scenario_finance.py
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from src.config import settings
from src.core.formatting import round_half_up
from src.core.scenario_models import Scenario, ScenarioMetrics

POSITIVE_COLOR = "#27ae60"
NEGATIVE_COLOR = "#e74c3c"
UNDEFINED_COLOR = "#666666"


def compute_gross_profit(
    revenue: Sequence[float],
    costs: Sequence[float],
) -> list[float]:
    """
    Elementwise revenue - costs.

    Both sequences must have the same length.
    """
    if len(revenue) != len(costs):
        raise ValueError(
            f"revenue and costs differ in length ({len(revenue)} != {len(costs)})"
        )

    gross = np.asarray(revenue) - np.asarray(costs)
    return gross.tolist()


def calculate_roi(net_profit: float, total_costs: float) -> Optional[float]:
    """
    ROI as a percentage rounded to one decimal place.

    Returns None when total_costs is zero: ROI is undefined there and
    callers render it as "N/A" rather than an infinity.
    """
    if total_costs == 0:
        return None

    roi = net_profit / total_costs * 100.0
    return float(round_half_up(roi, settings.ROI_DECIMALS))


def calculate_scenario_metrics(scenario: Scenario) -> ScenarioMetrics:
    """
    Aggregate a scenario's revenue and cost series into headline metrics.
    """
    total_revenue = sum(scenario.revenue)
    total_costs = sum(scenario.costs)
    net_profit = total_revenue - total_costs

    return ScenarioMetrics(
        total_revenue=total_revenue,
        total_costs=total_costs,
        net_profit=net_profit,
        roi=calculate_roi(net_profit, total_costs),
    )


def sign_color(value: Optional[float]) -> str:
    """Green for non-negative values, red for negative, grey when undefined."""
    if value is None:
        return UNDEFINED_COLOR
    return POSITIVE_COLOR if value >= 0 else NEGATIVE_COLOR
