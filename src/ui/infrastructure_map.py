# src/ui/infrastructure_map.py
from __future__ import annotations

import html
import logging
from typing import List, Optional, Sequence

import folium
import streamlit as st
import streamlit.components.v1 as components

from src.config import settings
from src.core.facilities import (
    FACILITY_TYPES,
    FacilityMarker,
    facility_modal,
    facility_tooltip,
    filter_markers_by_type,
    get_marker_by_id,
    marker_bounds,
)
from src.core.overlays import Overlay, OverlayManager
from src.data.facilities import get_all_markers
from src.ui import style
from src.ui.anchors import Anchors, resolve_anchor
from src.ui.overlay_panels import (
    get_overlay_manager,
    open_modal_dialog,
    overlay_fields_html,
    render_overlay_panel,
    reset_stale_modal,
)

logger = logging.getLogger(__name__)

MAP_WIDGET = "infrastructure_map"

MAP_CSS = f"""
<style>
.infrastructure-tooltip {{
    background: {style.COLOR_PRIMARY} !important;
    border: 2px solid {style.COLOR_ACCENT} !important;
    border-radius: 6px !important;
    color: white !important;
    box-shadow: 0 2px 6px rgba(0, 0, 0, 0.2) !important;
}}
.custom-marker {{ transition: transform 0.3s ease !important; }}
.custom-marker:hover {{ transform: scale(1.2) !important; }}
.leaflet-control-zoom a {{
    background: {style.COLOR_ACCENT} !important;
    color: {style.COLOR_PRIMARY} !important;
    font-weight: bold !important;
}}
</style>
"""


def marker_color(facility_type: str) -> str:
    return style.MARKER_COLORS.get(facility_type, style.COLOR_PRIMARY)


def marker_emoji(facility_type: str) -> str:
    return style.MARKER_EMOJIS.get(facility_type, style.MARKER_FALLBACK_EMOJI)


def _icon_html(facility_type: str) -> str:
    size = style.MARKER_ICON_SIZE_PX
    return (
        f'<div class="map-marker" style="background-color:{marker_color(facility_type)};'
        f"color:white;border-radius:50%;width:{size}px;height:{size}px;display:flex;"
        "align-items:center;justify-content:center;font-size:20px;"
        "border:3px solid white;box-shadow:0 2px 8px rgba(0,0,0,0.3);cursor:pointer;\">"
        f"{marker_emoji(facility_type)}</div>"
    )


def tooltip_html(overlay: Overlay) -> str:
    category = overlay.field_value("Category") or ""
    return (
        '<div style="padding:4px;max-width:250px;font-size:13px;">'
        f'<div style="font-weight:bold;margin-bottom:6px;font-size:14px;">'
        f"{html.escape(overlay.title)}</div>"
        f'<div style="line-height:1.5;color:{style.COLOR_ACCENT};">'
        f"{html.escape(overlay.body)}</div>"
        f'<div style="margin-top:8px;font-size:12px;color:#d0e8d8;">'
        f"<strong>{html.escape(category)}</strong></div></div>"
    )


def popup_html(marker: FacilityMarker, overlay: Overlay) -> str:
    return (
        '<div style="min-width:420px;font-family:sans-serif;">'
        '<div style="display:flex;align-items:center;gap:15px;margin-bottom:15px;'
        f'border-bottom:3px solid {style.COLOR_ACCENT};padding-bottom:10px;">'
        f'<span style="font-size:28px;">{marker.icon or marker_emoji(marker.type)}</span>'
        f'<h3 style="color:{style.COLOR_PRIMARY};margin:0;">'
        f"{html.escape(overlay.title)}</h3></div>"
        f"{overlay_fields_html(overlay)}"
        f'<div style="padding:12px;background:{style.COLOR_ACCENT};color:white;'
        'border-radius:6px;"><div style="font-weight:bold;margin-bottom:6px;">'
        f"Overview</div>{html.escape(overlay.body)}</div></div>"
    )


class InfrastructureMap:
    """
    Owns the folium map and the markers placed on it.

    With no focus marker the view fits all markers; with one, the view
    centres on it at street zoom. A tooltip overlay passed as
    `pinned_tooltip` is shown permanently open on the marker it describes;
    every other tooltip only opens on hover.
    """

    def __init__(
        self,
        markers: Sequence[FacilityMarker],
        focus_id: Optional[str] = None,
        pinned_tooltip: Optional[Overlay] = None,
    ) -> None:
        self.facilities: List[FacilityMarker] = list(markers)
        self.focus: Optional[FacilityMarker] = (
            get_marker_by_id(self.facilities, focus_id) if focus_id else None
        )
        if focus_id and self.focus is None:
            logger.debug("Highlight requested for unknown marker %r", focus_id)

        self.pinned_tooltip: Optional[Overlay] = None
        if pinned_tooltip is not None:
            if pinned_tooltip.kind != "tooltip":
                raise ValueError(
                    f"Expected a tooltip overlay, got {pinned_tooltip.kind!r}"
                )
            if get_marker_by_id(self.facilities, pinned_tooltip.source_id) is None:
                logger.debug(
                    "Pinned tooltip for hidden marker %r ignored",
                    pinned_tooltip.source_id,
                )
            else:
                self.pinned_tooltip = pinned_tooltip

        self.markers: List[folium.Marker] = []
        self.map = self._build_map()

    def _build_map(self) -> folium.Map:
        if self.focus is not None:
            center = list(self.focus.location)
            zoom = settings.MAP_HIGHLIGHT_ZOOM
        else:
            center = [settings.MAP_CENTER_LAT, settings.MAP_CENTER_LNG]
            zoom = settings.MAP_DEFAULT_ZOOM

        fmap = folium.Map(
            location=center,
            zoom_start=zoom,
            tiles=None,
            zoom_control=True,
            scrollWheelZoom=True,
            dragging=True,
        )
        folium.TileLayer(
            tiles=settings.MAP_TILE_URL,
            attr=settings.MAP_TILE_ATTRIBUTION,
            max_zoom=settings.MAP_TILE_MAX_ZOOM,
            name="OpenStreetMap",
        ).add_to(fmap)
        fmap.get_root().header.add_child(folium.Element(MAP_CSS))

        for facility in self.facilities:
            self.markers.append(self._add_marker(fmap, facility))

        bounds = marker_bounds(self.facilities)
        if self.focus is None and bounds is not None:
            fmap.fit_bounds(bounds, padding=settings.MAP_FIT_PADDING_PX)

        return fmap

    def _add_marker(self, fmap: folium.Map, facility: FacilityMarker) -> folium.Marker:
        size = style.MARKER_ICON_SIZE_PX
        tooltip = facility_tooltip(facility)
        is_pinned = (
            self.pinned_tooltip is not None
            and self.pinned_tooltip.source_id == facility.id
        )
        if is_pinned:
            tooltip = self.pinned_tooltip

        marker = folium.Marker(
            location=list(facility.location),
            icon=folium.DivIcon(
                html=_icon_html(facility.type),
                icon_size=(size, size),
                icon_anchor=(size // 2, size // 2),
                class_name="custom-marker",
            ),
            tooltip=folium.Tooltip(
                tooltip_html(tooltip),
                sticky=False,
                permanent=is_pinned,
                direction="top",
                offset=(0, -20),
                class_name="infrastructure-tooltip",
            ),
            popup=folium.Popup(
                popup_html(facility, facility_modal(facility)),
                max_width=600,
            ),
        )
        marker.add_to(fmap)
        return marker

    def to_html(self) -> str:
        return self.map.get_root().render()

    def render(self) -> None:
        components.html(self.to_html(), height=settings.MAP_HEIGHT_PX)


@st.dialog("Facility details", width="large")
def _facility_dialog(manager: OverlayManager) -> None:
    overlay = manager.modal
    if overlay is None:
        return
    st.subheader(overlay.title)
    render_overlay_panel(overlay)
    if st.button("Close", key="close_facility_dialog"):
        manager.close_modal()
        st.rerun()


def _visible_markers(
    markers: Sequence[FacilityMarker],
    selected_types: Sequence[str],
) -> List[FacilityMarker]:
    visible_ids = {
        m.id for t in selected_types for m in filter_markers_by_type(markers, t)
    }
    return [m for m in markers if m.id in visible_ids]


def render_infrastructure_map_section(anchors: Anchors) -> None:
    """
    Interactive map of energy facilities and terminals.
    """
    container = resolve_anchor(anchors, settings.ANCHOR_INFRASTRUCTURE_MAP)
    if container is None:
        return

    manager = get_overlay_manager(MAP_WIDGET)
    reset_stale_modal(manager)
    all_markers = get_all_markers()

    with container:
        st.header("Energy infrastructure")
        st.caption(
            "Interactive map of Newfoundland energy facilities and terminals. "
            "Hover a marker for a summary, click it for full details."
        )

        selected_types = st.multiselect(
            "Facility types",
            options=list(FACILITY_TYPES),
            default=list(FACILITY_TYPES),
            format_func=lambda t: f"{marker_emoji(t)} {t.title()}",
        )
        visible = _visible_markers(all_markers, selected_types)
        if not visible:
            st.info("No facilities match the selected types.")

        focus_id = st.selectbox(
            "Highlight facility",
            options=[""] + [m.id for m in visible],
            format_func=lambda mid: (
                "All facilities" if not mid else get_marker_by_id(visible, mid).name
            ),
        )

        focus = get_marker_by_id(visible, focus_id) if focus_id else None
        if focus is not None:
            manager.show_tooltip(facility_tooltip(focus))
        else:
            manager.hide_tooltip()

        fmap = InfrastructureMap(
            visible,
            focus_id=focus.id if focus else None,
            pinned_tooltip=manager.tooltip,
        )
        fmap.render()

        if focus is not None and st.button("View facility details"):
            open_modal_dialog(manager, facility_modal(focus), _facility_dialog)
