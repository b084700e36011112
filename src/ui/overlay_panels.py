# src/ui/overlay_panels.py
from __future__ import annotations

import html
from typing import Callable

import streamlit as st

from src.core.overlays import Overlay, OverlayManager
from src.ui import style


def get_overlay_manager(widget: str) -> OverlayManager:
    """One OverlayManager per widget, kept across Streamlit reruns."""
    state_key = f"overlays::{widget}"
    manager = st.session_state.get(state_key)
    if not isinstance(manager, OverlayManager):
        manager = OverlayManager(widget)
        st.session_state[state_key] = manager
    return manager


def overlay_fields_html(overlay: Overlay) -> str:
    """Two-column label/value grid for a modal overlay."""
    items = "".join(
        f'<div style="padding:12px;background:{style.COLOR_BACKGROUND};'
        f"border-radius:6px;border-left:4px solid {style.COLOR_SECONDARY};\">"
        f'<div style="font-weight:600;color:{style.COLOR_PRIMARY};font-size:12px;'
        f'text-transform:uppercase;margin-bottom:5px;">{html.escape(f.label)}</div>'
        f'<div style="color:#555;font-size:14px;font-weight:500;">'
        f"{html.escape(f.value)}</div></div>"
        for f in overlay.fields
    )
    return (
        '<div style="display:grid;grid-template-columns:1fr 1fr;gap:15px;'
        f'margin-bottom:20px;">{items}</div>'
    )


def render_overlay_panel(overlay: Overlay, body_heading: str = "Overview") -> None:
    st.markdown(overlay_fields_html(overlay), unsafe_allow_html=True)
    if overlay.body:
        st.markdown(f"**{body_heading}**")
        st.write(overlay.body)


def open_modal_dialog(
    manager: OverlayManager,
    overlay: Overlay,
    dialog: Callable[[OverlayManager], None],
) -> None:
    """Record `overlay` as the widget's one open modal and show it in `dialog`."""
    manager.close_modal()
    manager.open_modal(overlay)
    dialog(manager)


def reset_stale_modal(manager: OverlayManager) -> None:
    """
    Forget a modal left over from an earlier run.

    st.dialog gives no callback when dismissed with its X button or Escape,
    and a dismissed dialog does not come back on the next full rerun, so
    a modal recorded before this run is already gone from the page.
    """
    manager.close_modal()
