# src/data/facilities.py
from __future__ import annotations

from typing import List

from src.core.facilities import FacilityMarker, validate_unique_ids

# Placeholder coordinates around Placentia Bay / Avalon, Newfoundland.
INFRASTRUCTURE_MARKERS: List[FacilityMarker] = [
    FacilityMarker(
        id="come-by-chance",
        name="Come By Chance Refinery",
        type="refinery",
        category="Primary Facility",
        description="Primary oil refining facility",
        latitude=47.2500,
        longitude=-52.7333,
        details={
            "capacity": "115,000 barrels/day",
            "function": "Crude oil processing and refined product production",
            "cost": "$2.5 billion CAD",
            "employees": "850+",
            "year_started": 2023,
            "status": "Operational",
        },
        icon="🏭",
    ),
    FacilityMarker(
        id="whiffen-head",
        name="Whiffen Head Terminal",
        type="terminal",
        category="Export Terminal",
        description="Primary marine export facility",
        latitude=47.3200,
        longitude=-52.8400,
        details={
            "capacity": "50,000 barrels/day",
            "function": "Marine loading and export operations",
            "cost": "$650 million CAD",
            "docking": "4 berths",
            "year_started": 2024,
            "status": "Under Development",
        },
        icon="⚓",
    ),
    FacilityMarker(
        id="storage-terminal-1",
        name="Strategic Storage Terminal - East",
        type="storage",
        category="Storage Facility",
        description="Crude oil storage facility",
        latitude=47.3600,
        longitude=-52.6500,
        details={
            "capacity": "8 million barrels",
            "function": "Crude oil and feedstock storage",
            "cost": "$180 million CAD",
            "tanks": "6 storage tanks",
            "year_started": 2022,
            "status": "Operational",
        },
        icon="🛢️",
    ),
    FacilityMarker(
        id="storage-terminal-2",
        name="Strategic Storage Terminal - Central",
        type="storage",
        category="Storage Facility",
        description="Refined product storage facility",
        latitude=47.2800,
        longitude=-52.8000,
        details={
            "capacity": "6 million barrels",
            "function": "Refined product storage and distribution",
            "cost": "$145 million CAD",
            "tanks": "5 storage tanks",
            "year_started": 2022,
            "status": "Operational",
        },
        icon="🛢️",
    ),
    FacilityMarker(
        id="storage-terminal-3",
        name="Strategic Storage Terminal - West",
        type="storage",
        category="Storage Facility",
        description="Emergency reserve storage",
        latitude=47.1900,
        longitude=-52.9200,
        details={
            "capacity": "4 million barrels",
            "function": "Emergency reserve and strategic storage",
            "cost": "$95 million CAD",
            "tanks": "3 storage tanks",
            "year_started": 2023,
            "status": "Operational",
        },
        icon="🛢️",
    ),
    FacilityMarker(
        id="marine-facility",
        name="Marine Maintenance & Fueling Facility",
        type="maintenance",
        category="Support Facility",
        description="Vessel maintenance and fueling operations",
        latitude=47.2650,
        longitude=-52.7100,
        details={
            "capacity": "5 vessels simultaneously",
            "function": "Bunkering, maintenance, and support operations",
            "cost": "$220 million CAD",
            "drydock": "1 facility",
            "year_started": 2024,
            "status": "Under Development",
        },
        icon="🛠️",
    ),
    FacilityMarker(
        id="memorial-university",
        name="Memorial University Petroleum Engineering Campus",
        type="education",
        category="Research & Education",
        description="Energy research and training facility",
        latitude=47.5600,
        longitude=-52.7300,
        details={
            "capacity": "500 students/year",
            "function": "Engineering education, research, and workforce development",
            "cost": "$85 million CAD",
            "classrooms": "12 labs + lecture halls",
            "year_started": 2025,
            "status": "Planned",
        },
        icon="🎓",
    ),
]

validate_unique_ids(INFRASTRUCTURE_MARKERS)


def get_all_markers() -> List[FacilityMarker]:
    return list(INFRASTRUCTURE_MARKERS)
