# src/core/errors.py
from __future__ import annotations


class DatasetError(ValueError):
    """Raised when a static dataset literal breaks one of its invariants."""
