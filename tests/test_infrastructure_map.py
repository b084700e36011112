import pytest

from src.core.facilities import facility_modal, facility_tooltip, get_marker_by_id
from src.core.overlays import OverlayManager
from src.data.facilities import INFRASTRUCTURE_MARKERS
from src.ui import style
from src.ui.infrastructure_map import (
    InfrastructureMap,
    _visible_markers,
    marker_color,
    marker_emoji,
)


def test_marker_icon_lookup_with_fallback():
    assert marker_emoji("refinery") == "🏭"
    assert marker_color("terminal") == style.COLOR_SECONDARY
    assert marker_emoji("spaceport") == "📍"
    assert marker_color("spaceport") == style.COLOR_PRIMARY


def test_map_has_one_marker_per_facility():
    fmap = InfrastructureMap(INFRASTRUCTURE_MARKERS)

    assert len(fmap.markers) == len(INFRASTRUCTURE_MARKERS)
    assert fmap.focus is None


def test_map_html_contains_tooltips_and_details():
    page = InfrastructureMap(INFRASTRUCTURE_MARKERS).to_html()

    assert "Come By Chance Refinery" in page
    assert "115,000 barrels/day" in page
    assert "fitBounds" in page


def test_highlight_centres_on_marker():
    fmap = InfrastructureMap(INFRASTRUCTURE_MARKERS, focus_id="whiffen-head")

    assert fmap.focus is not None
    assert fmap.focus.id == "whiffen-head"
    assert "fitBounds" not in fmap.to_html()


def test_highlight_unknown_marker_falls_back_to_overview():
    fmap = InfrastructureMap(INFRASTRUCTURE_MARKERS, focus_id="missing")

    assert fmap.focus is None
    assert len(fmap.markers) == len(INFRASTRUCTURE_MARKERS)


def test_empty_map_renders_without_markers():
    fmap = InfrastructureMap([])
    assert fmap.markers == []
    assert "fitBounds" not in fmap.to_html()


def test_visible_markers_by_type():
    visible = _visible_markers(INFRASTRUCTURE_MARKERS, ["education", "refinery"])
    assert [m.id for m in visible] == ["come-by-chance", "memorial-university"]
    assert _visible_markers(INFRASTRUCTURE_MARKERS, []) == []


def test_pinned_tooltip_follows_overlay_manager():
    manager = OverlayManager("infrastructure_map")
    marker = get_marker_by_id(INFRASTRUCTURE_MARKERS, "whiffen-head")
    manager.show_tooltip(facility_tooltip(marker))

    fmap = InfrastructureMap(
        INFRASTRUCTURE_MARKERS,
        focus_id=marker.id,
        pinned_tooltip=manager.tooltip,
    )
    assert fmap.pinned_tooltip is manager.tooltip

    manager.hide_tooltip()
    fmap = InfrastructureMap(
        INFRASTRUCTURE_MARKERS,
        focus_id=marker.id,
        pinned_tooltip=manager.tooltip,
    )
    assert fmap.pinned_tooltip is None


def test_pinned_tooltip_for_filtered_out_marker_is_ignored():
    marker = get_marker_by_id(INFRASTRUCTURE_MARKERS, "whiffen-head")
    others = [m for m in INFRASTRUCTURE_MARKERS if m.id != marker.id]

    fmap = InfrastructureMap(others, pinned_tooltip=facility_tooltip(marker))

    assert fmap.pinned_tooltip is None


def test_pinned_tooltip_rejects_modal_overlay():
    marker = INFRASTRUCTURE_MARKERS[0]
    with pytest.raises(ValueError):
        InfrastructureMap(INFRASTRUCTURE_MARKERS, pinned_tooltip=facility_modal(marker))
