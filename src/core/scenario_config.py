# src/core/scenario_config.py
from __future__ import annotations

import logging
from typing import Dict, Optional

from src.config import settings
from src.core.scenario_models import Scenario
from src.data.scenarios import FINANCIAL_SCENARIOS

logger = logging.getLogger(__name__)


def parse_scenario_key(value: object) -> Optional[int]:
    """
    Parse the value emitted by the scenario selector.

    Accepts ints or numeric strings ("75", " 100 ") and validates them
    against the configured scenario keys. Returns None for anything else.
    """
    if isinstance(value, bool):
        return None

    try:
        key = int(str(value).strip())
    except (TypeError, ValueError):
        logger.debug("Ignoring non-numeric scenario selection %r", value)
        return None

    if key not in settings.SCENARIO_KEYS:
        logger.debug("Ignoring unknown scenario key %s", key)
        return None
    return key


def get_scenario(
    key: object,
    scenarios: Dict[int, Scenario] | None = None,
) -> Optional[Scenario]:
    """
    Look up a scenario by selector value; unknown keys give None.
    """
    table = FINANCIAL_SCENARIOS if scenarios is None else scenarios
    parsed = parse_scenario_key(key)
    if parsed is None:
        return None
    return table.get(parsed)


def default_scenario() -> Scenario:
    return FINANCIAL_SCENARIOS[settings.DEFAULT_SCENARIO_KEY]
