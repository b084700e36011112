# src/data/roadmap.py
from __future__ import annotations

from typing import List

from src.core.roadmap_models import RoadmapPhase

# 20-year roadmap, in display order (not sorted by start year).
ROADMAP_PHASES: List[RoadmapPhase] = [
    RoadmapPhase(
        name="Debt Repayment",
        start_year=1,
        end_year=10,
        cost=1_000_000_000,
        revenue_impact=0,
        description="Allocate 100% of gross profits to debt service",
    ),
    RoadmapPhase(
        name="Refinery Expansion",
        start_year=12,
        end_year=15,
        cost=400_000_000,
        revenue_impact=200_000_000,
        description="Double refinery capacity for surplus production",
    ),
    RoadmapPhase(
        name="Cogeneration",
        start_year=10,
        end_year=12,
        cost=100_000_000,
        revenue_impact=50_000_000,
        description="Add cogeneration units to support the grid",
    ),
    RoadmapPhase(
        name="Strategic Storage",
        start_year=1,
        end_year=5,
        cost=150_000_000,
        revenue_impact=0,
        description="Build crude oil and refined product storage facilities",
    ),
    RoadmapPhase(
        name="Pipeline Completion",
        start_year=6,
        end_year=9,
        cost=350_000_000,
        revenue_impact=75_000_000,
        description="Complete pipeline infrastructure for product distribution",
    ),
    RoadmapPhase(
        name="Marine Facility",
        start_year=8,
        end_year=12,
        cost=250_000_000,
        revenue_impact=100_000_000,
        description="Develop marine terminal for international shipping",
    ),
    RoadmapPhase(
        name="University Campus",
        start_year=13,
        end_year=17,
        cost=80_000_000,
        revenue_impact=15_000_000,
        description="Build energy research and training campus",
    ),
    RoadmapPhase(
        name="Export Infrastructure",
        start_year=16,
        end_year=20,
        cost=200_000_000,
        revenue_impact=150_000_000,
        description="Establish export hubs and international partnerships",
    ),
]
