# src/config/log.py
from __future__ import annotations

import logging

from src.config.env import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once for the Streamlit process.

    Streamlit re-executes the script on every interaction, so repeated
    calls must not stack handlers.
    """
    root = logging.getLogger()
    resolved = (level or LOG_LEVEL).upper()
    root.setLevel(getattr(logging, resolved, logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
