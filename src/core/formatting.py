# src/core/formatting.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from src.config import settings


def round_half_up(value: float, decimals: int = 0) -> Decimal:
    """
    Round to `decimals` places, ties away from zero.

    The float is converted exactly, so 2.5 -> 3 and -0.5 -> -1 while
    1.005 (stored as 1.00499...) -> 1.00.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def format_currency(value: float) -> str:
    """
    Format an amount in whole currency units as rounded millions.

    1_000_000_000 -> "$1000M", -50_000_000 -> "$-50M". Decimal precision
    is dropped on purpose; negative values keep a plain minus sign.
    """
    millions = value / settings.CURRENCY_UNITS_PER_MILLION
    return f"${round_half_up(millions):f}M"


def format_millions(value: Optional[float]) -> str:
    """Format a value that is already expressed in millions."""
    if value is None:
        return "—"
    return f"${round_half_up(value):f}M"


def format_percentage(value: Optional[float], decimals: int = 1) -> str:
    if value is None:
        return "N/A"
    return f"{round_half_up(value, decimals):f}%"
