# src/ui/anchors.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

import streamlit as st

from src.config import settings

logger = logging.getLogger(__name__)

Anchors = Dict[str, Any]


def build_page_anchors(
    sections: Iterable[str] | None = None,
) -> Anchors:
    """
    Create one Streamlit container per enabled page section.

    Sections default to settings.DASHBOARD_SECTIONS; unknown section
    names are logged and skipped.
    """
    anchors: Anchors = {}
    for section in sections if sections is not None else settings.DASHBOARD_SECTIONS:
        if section not in settings.ALL_ANCHORS:
            logger.warning("Ignoring unknown dashboard section %r", section)
            continue
        anchors[section] = st.container()
    return anchors


def resolve_anchor(anchors: Anchors, anchor_id: str) -> Optional[Any]:
    """
    Return the container registered under `anchor_id`.

    A missing anchor is not fatal: it is logged and None is returned so
    the widget can skip rendering while the rest of the page carries on.
    """
    container = anchors.get(anchor_id)
    if container is None:
        logger.error(
            "Container with id %r not found; skipping its widget", anchor_id
        )
    return container
