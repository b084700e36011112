# src/data/scenarios.py
from __future__ import annotations

from typing import Dict, List, Sequence

from src.config import settings
from src.core.errors import DatasetError
from src.core.scenario_finance import compute_gross_profit
from src.core.scenario_models import Scenario

# Operating costs are identical across the three capture scenarios (CAD $M).
_OPERATING_COSTS = [
    120, 130, 140, 135, 130, 125, 120, 115, 112, 110,
    108, 107, 106, 105, 105, 105, 105, 105, 105, 105,
]  # fmt: skip

_SCENARIO_LITERALS = {
    50: {
        "name": "50% Market Capture",
        "revenue": [
            45, 95, 150, 215, 280, 350, 420, 485, 545, 600,
            650, 695, 735, 770, 800, 825, 845, 860, 870, 875,
        ],
        "cumulative_debt": [
            200, 235, 265, 315, 365, 490, 590, 660, 693, 683,
            635, 533, 362, 162, -88, -288, -588, -948, -1378, -1873,
        ],
    },
    75: {
        "name": "75% Market Capture",
        "revenue": [
            65, 140, 225, 320, 425, 540, 655, 765, 870, 960,
            1035, 1095, 1140, 1170, 1185, 1185, 1180, 1165, 1140, 1105,
        ],
        "cumulative_debt": [
            200, 190, 155, 70, -135, -400, -800, -1400, -2130, -2970,
            -3845, -4775, -5810, -6945, -8160, -9360, -10605, -11915, -13300, -14760,
        ],
    },
    100: {
        "name": "100% Market Capture",
        "revenue": [
            85, 185, 300, 425, 565, 720, 880, 1040, 1195, 1330,
            1440, 1525, 1585, 1615, 1615, 1590, 1540, 1465, 1360, 1225,
        ],
        "cumulative_debt": [
            200, 145, 85, 5, -185, -500, -900, -1375, -1905, -2480,
            -3095, -3755, -4460, -5215, -6025, -6890, -7835, -8870, -10010, -11260,
        ],
    },
}  # fmt: skip


def year_labels(n_years: int = settings.PROJECTION_YEARS) -> List[str]:
    return [f"Year {i + 1}" for i in range(n_years)]


def build_scenario(
    key: int,
    name: str,
    revenue: Sequence[float],
    costs: Sequence[float],
    cumulative_debt: Sequence[float],
    years: Sequence[str] | None = None,
) -> Scenario:
    """
    Build a Scenario and derive its gross profit series.

    Every series must have the same length as the year labels.
    """
    labels = list(years) if years is not None else year_labels(len(revenue))

    for label, series in (
        ("revenue", revenue),
        ("costs", costs),
        ("cumulative_debt", cumulative_debt),
    ):
        if len(series) != len(labels):
            raise DatasetError(
                f"Scenario {key}: {label} has {len(series)} values, "
                f"expected {len(labels)}"
            )

    return Scenario(
        key=key,
        name=name,
        years=labels,
        revenue=list(revenue),
        costs=list(costs),
        gross_profit=compute_gross_profit(revenue, costs),
        cumulative_debt=list(cumulative_debt),
    )


def build_financial_scenarios() -> Dict[int, Scenario]:
    return {
        key: build_scenario(
            key=key,
            name=literal["name"],
            revenue=literal["revenue"],
            costs=_OPERATING_COSTS,
            cumulative_debt=literal["cumulative_debt"],
        )
        for key, literal in _SCENARIO_LITERALS.items()
    }


FINANCIAL_SCENARIOS: Dict[int, Scenario] = build_financial_scenarios()
