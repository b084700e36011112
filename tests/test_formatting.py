from decimal import Decimal

from src.core.formatting import (
    format_currency,
    format_millions,
    format_percentage,
    round_half_up,
)


def test_format_currency_in_millions():
    assert format_currency(1_000_000_000) == "$1000M"
    assert format_currency(400_000_000) == "$400M"
    assert format_currency(0) == "$0M"


def test_format_currency_negative_has_plain_minus():
    assert format_currency(-50_000_000) == "$-50M"


def test_format_currency_drops_decimals():
    assert format_currency(12_300_000) == "$12M"


def test_format_millions():
    assert format_millions(16365) == "$16365M"
    assert format_millions(-88) == "$-88M"
    assert format_millions(None) == "—"


def test_format_percentage():
    assert format_percentage(613.7) == "613.7%"
    assert format_percentage(-12.0) == "-12.0%"
    assert format_percentage(None) == "N/A"


def test_half_way_values_round_away_from_zero():
    assert format_currency(2_500_000) == "$3M"
    assert format_currency(-2_500_000) == "$-3M"
    assert format_millions(0.5) == "$1M"
    assert format_millions(1.5) == "$2M"
    assert format_percentage(0.25) == "0.3%"


def test_round_half_up_uses_the_stored_float():
    # 1.005 is stored just below the half-way point
    assert round_half_up(1.005, 2) == Decimal("1.00")
    assert round_half_up(2.5) == Decimal("3")
    assert round_half_up(-0.5) == Decimal("-1")
