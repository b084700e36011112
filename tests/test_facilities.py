import pytest

from src.core.errors import DatasetError
from src.core.facilities import (
    FacilityMarker,
    facility_modal,
    facility_tooltip,
    filter_markers_by_type,
    get_marker_by_id,
    marker_bounds,
    validate_unique_ids,
)
from src.data.facilities import INFRASTRUCTURE_MARKERS, get_all_markers


def test_catalogue_has_unique_ids():
    ids = [m.id for m in INFRASTRUCTURE_MARKERS]
    assert len(ids) == len(set(ids)) == 7


def test_get_marker_by_id():
    marker = get_marker_by_id(INFRASTRUCTURE_MARKERS, "whiffen-head")
    assert marker is not None
    assert marker.name == "Whiffen Head Terminal"


def test_get_marker_by_unknown_id_returns_none():
    assert get_marker_by_id(INFRASTRUCTURE_MARKERS, "no-such-facility") is None
    assert get_marker_by_id([], "come-by-chance") is None


def test_filter_by_type_preserves_order():
    storage = filter_markers_by_type(INFRASTRUCTURE_MARKERS, "storage")
    assert [m.id for m in storage] == [
        "storage-terminal-1",
        "storage-terminal-2",
        "storage-terminal-3",
    ]


def test_filter_by_unused_type_is_empty():
    assert filter_markers_by_type(INFRASTRUCTURE_MARKERS, "pipeline") == []


def test_get_all_markers_returns_copy():
    markers = get_all_markers()
    markers.clear()
    assert len(get_all_markers()) == 7


def test_duplicate_ids_are_rejected():
    marker = INFRASTRUCTURE_MARKERS[0]
    with pytest.raises(DatasetError):
        validate_unique_ids([marker, marker])


def test_marker_bounds():
    bounds = marker_bounds(INFRASTRUCTURE_MARKERS)
    assert bounds == [[47.19, -52.92], [47.56, -52.65]]
    assert marker_bounds([]) is None


def test_facility_tooltip_and_modal():
    marker = get_marker_by_id(INFRASTRUCTURE_MARKERS, "come-by-chance")

    tooltip = facility_tooltip(marker)
    assert tooltip.kind == "tooltip"
    assert tooltip.body == "Primary oil refining facility"
    assert tooltip.field_value("Category") == "Primary Facility"

    modal = facility_modal(marker)
    assert modal.kind == "modal"
    assert [f.label for f in modal.fields] == [
        "Type",
        "Status",
        "Capacity",
        "Function",
        "Total Cost",
        "Year Started",
    ]
    assert modal.field_value("Year Started") == "2023"
    assert modal.field_value("Total Cost") == "$2.5 billion CAD"


def test_missing_detail_uses_placeholder():
    marker = FacilityMarker(
        id="bare",
        name="Bare",
        type="unknown",
        category="Other",
        description="",
        latitude=0.0,
        longitude=0.0,
    )
    assert facility_modal(marker).field_value("Status") == "—"
