import pytest

from src.core.scenario_config import default_scenario, get_scenario, parse_scenario_key


@pytest.mark.parametrize(
    "value, expected",
    [
        ("75", 75),
        (" 100 ", 100),
        (50, 50),
        ("60", None),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_scenario_key(value, expected):
    assert parse_scenario_key(value) == expected


def test_get_scenario_known_key():
    scenario = get_scenario("100")
    assert scenario is not None
    assert scenario.key == 100
    assert scenario.name == "100% Market Capture"


def test_get_scenario_unknown_key_is_absent():
    assert get_scenario(42) is None
    assert get_scenario("not-a-key") is None


def test_default_scenario_is_75_percent():
    assert default_scenario().key == 75
