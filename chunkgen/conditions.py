"""Spawn condition evaluation.

A conditions block maps snapshot readings to ``{"min": .., "max": ..}``
ranges, plus two special keys: ``chance`` (read by the selector, ignored
here) and ``soilType`` (a list of allowed soil tags).  Malformed entries are
skipped with a warning rather than failing the candidate.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .base import EnvironmentalSnapshot

logger = logging.getLogger(__name__)

_SOIL_KEYS = ("soilType", "soil_type")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _soil_allowed(condition: Any, soil_type: str) -> Optional[bool]:
    """True/False for a soil list, None if the condition is malformed."""
    if isinstance(condition, str):
        return soil_type == condition
    if isinstance(condition, (list, tuple, set, frozenset)):
        return soil_type in condition
    return None


def eligible(conditions: Optional[Mapping[str, Any]], snapshot: EnvironmentalSnapshot) -> bool:
    """Check whether a snapshot satisfies every condition in a block.

    Args:
        conditions: Authored conditions, e.g.
            ``{"moisture": {"min": 30}, "soilType": ["loamy"], "chance": 0.4}``.
            None or empty means no constraints.
        snapshot: The chunk being populated.

    Returns:
        False if any well-formed range or soil constraint fails, else True.
    """
    if not conditions:
        return True

    for key, condition in conditions.items():
        if key == "chance":
            continue

        if key in _SOIL_KEYS:
            allowed = _soil_allowed(condition, snapshot.soil_type)
            if allowed is None:
                logger.warning(f"Malformed soil condition {condition!r}, skipping")
                continue
            if not allowed:
                return False
            continue

        value = snapshot.value_of(key)
        if not _is_number(value):
            logger.warning(f"Condition on non-numeric field '{key}', skipping")
            continue
        if not isinstance(condition, Mapping):
            logger.warning(f"Malformed condition for '{key}': {condition!r}, skipping")
            continue

        low = condition.get("min")
        high = condition.get("max")
        if (low is not None and not _is_number(low)) or (high is not None and not _is_number(high)):
            logger.warning(f"Non-numeric bound for '{key}': {condition!r}, skipping")
            continue
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False

    return True
