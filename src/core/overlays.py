# src/core/overlays.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Optional

logger = logging.getLogger(__name__)

OverlayKind = Literal["tooltip", "modal"]


@dataclass(frozen=True)
class DetailField:
    label: str
    value: str


@dataclass(frozen=True)
class Overlay:
    """
    Declarative description of a tooltip or modal panel.

    The UI layer decides how to draw it (HTML, st.dialog, folium popup);
    building one never touches a UI toolkit.
    """

    kind: OverlayKind
    title: str
    fields: List[DetailField] = field(default_factory=list)
    body: str = ""
    source_id: Optional[str] = None  # phase name / marker id it describes

    def field_value(self, label: str) -> Optional[str]:
        for item in self.fields:
            if item.label == label:
                return item.value
        return None


class OverlayManager:
    """
    Owns the transient overlays of a single widget.

    At most one tooltip and one modal are open at any time; opening a new
    one tears down the previous one of the same kind.
    """

    def __init__(self, widget: str) -> None:
        self.widget = widget
        self._tooltip: Optional[Overlay] = None
        self._modal: Optional[Overlay] = None

    @property
    def tooltip(self) -> Optional[Overlay]:
        return self._tooltip

    @property
    def modal(self) -> Optional[Overlay]:
        return self._modal

    def show_tooltip(self, overlay: Overlay) -> None:
        if overlay.kind != "tooltip":
            raise ValueError(f"Expected a tooltip overlay, got {overlay.kind!r}")
        self.hide_tooltip()
        self._tooltip = overlay

    def hide_tooltip(self) -> None:
        self._tooltip = None

    def open_modal(self, overlay: Overlay) -> None:
        if overlay.kind != "modal":
            raise ValueError(f"Expected a modal overlay, got {overlay.kind!r}")
        if self._modal is not None:
            logger.debug(
                "%s: replacing open modal %r", self.widget, self._modal.title
            )
        self._modal = overlay

    def close_modal(self) -> None:
        self._modal = None

    def open_overlays(self) -> List[Overlay]:
        return [o for o in (self._tooltip, self._modal) if o is not None]
