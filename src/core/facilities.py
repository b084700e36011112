# src/core/facilities.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from src.core.errors import DatasetError
from src.core.overlays import DetailField, Overlay

FACILITY_TYPES: tuple[str, ...] = (
    "refinery",
    "terminal",
    "storage",
    "maintenance",
    "education",
)


@dataclass(frozen=True)
class FacilityMarker:
    """
    A geo-located infrastructure record shown on the map.

    `details` keeps the label -> value pairs from the facility sheet
    (capacity, function, cost, year_started, status and one
    type-specific extra such as berths or tanks).
    """

    id: str
    name: str
    type: str
    category: str
    description: str
    latitude: float
    longitude: float
    details: Dict[str, object] = field(default_factory=dict)
    icon: str = ""

    @property
    def location(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    def detail(self, key: str, default: str = "—") -> str:
        value = self.details.get(key)
        return default if value is None else str(value)


def validate_unique_ids(markers: Iterable[FacilityMarker]) -> None:
    seen: set[str] = set()
    for marker in markers:
        if marker.id in seen:
            raise DatasetError(f"Duplicate facility marker id {marker.id!r}")
        seen.add(marker.id)


def get_marker_by_id(
    markers: Sequence[FacilityMarker],
    marker_id: str,
) -> Optional[FacilityMarker]:
    """Return the marker with this id, or None when it is unknown."""
    return next((m for m in markers if m.id == marker_id), None)


def filter_markers_by_type(
    markers: Sequence[FacilityMarker],
    facility_type: str,
) -> List[FacilityMarker]:
    """Markers of one type, in catalogue order (possibly empty)."""
    return [m for m in markers if m.type == facility_type]


def marker_bounds(
    markers: Sequence[FacilityMarker],
) -> Optional[list[list[float]]]:
    """[[south, west], [north, east]] around the markers, or None if empty."""
    if not markers:
        return None
    lats = [m.latitude for m in markers]
    lngs = [m.longitude for m in markers]
    return [[min(lats), min(lngs)], [max(lats), max(lngs)]]


def facility_tooltip(marker: FacilityMarker) -> Overlay:
    return Overlay(
        kind="tooltip",
        title=marker.name,
        fields=[DetailField("Category", marker.category)],
        body=marker.description,
        source_id=marker.id,
    )


def facility_modal(marker: FacilityMarker) -> Overlay:
    return Overlay(
        kind="modal",
        title=marker.name,
        fields=[
            DetailField("Type", marker.category),
            DetailField("Status", marker.detail("status")),
            DetailField("Capacity", marker.detail("capacity")),
            DetailField("Function", marker.detail("function")),
            DetailField("Total Cost", marker.detail("cost")),
            DetailField("Year Started", marker.detail("year_started")),
        ],
        body=marker.description,
        source_id=marker.id,
    )
