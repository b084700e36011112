# src/core/roadmap_models.py
from __future__ import annotations

from dataclasses import dataclass

from src.config import settings
from src.core.errors import DatasetError


@dataclass(frozen=True)
class RoadmapPhase:
    """
    One roadmap initiative spanning an inclusive range of project years.

    cost and revenue_impact are whole currency units (CAD).
    """

    name: str
    start_year: int
    end_year: int
    cost: float
    revenue_impact: float
    description: str

    def __post_init__(self) -> None:
        first, last = settings.ROADMAP_FIRST_YEAR, settings.ROADMAP_LAST_YEAR
        if not (first <= self.start_year <= self.end_year <= last):
            raise DatasetError(
                f"Phase {self.name!r}: interval [{self.start_year}, "
                f"{self.end_year}] must satisfy {first} <= start <= end <= {last}"
            )

    @property
    def duration_years(self) -> int:
        return self.end_year - self.start_year + 1

    @property
    def net_impact(self) -> float:
        return self.revenue_impact - self.cost
