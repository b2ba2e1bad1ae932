"""Tuning constants for chunk generation.

The defaults are the balance values the generator ships with.  Each one can
be overridden with a ``CHUNKGEN_<NAME>`` environment variable, for example
``CHUNKGEN_BASE_FIND_CHANCE=0.05``.  Variables may also come from a
``.env`` file loaded through python-dotenv.

Environment Variables:
    CHUNKGEN_BASE_MAX_ITEMS: item capacity before multipliers (default 1.4)
    CHUNKGEN_BASE_FIND_CHANCE: chance a chunk rolls for items at all (0.035)
    CHUNKGEN_COST_SCALE: budget cost multiplier for rarer items (0.6)
    CHUNKGEN_SOFTCAP_K: softcap curve constant, in [0, 1) (0.4)
    ... one variable per field of :class:`Tuning`.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "CHUNKGEN_"


@dataclass(frozen=True)
class Tuning:
    """Balance constants consumed by the assembler and region generator."""

    # Item pipeline
    base_max_items: float = 1.4
    base_find_chance: float = 0.035
    cost_scale: float = 0.6
    softcap_k: float = 0.4
    item_chance_cap: float = 0.95
    rare_fallback_chance: float = 0.02
    rare_fallback_min_tier: int = 5

    # Independent gates
    npc_base_chance: float = 0.01
    enemy_base_chance: float = 0.006
    plant_base_chance: float = 0.95
    animal_base_chance: float = 0.08
    max_plants_per_chunk: int = 18

    # Region generation
    border_wall_chance: float = 0.3


DEFAULT_TUNING = Tuning()


def _validate(tuning: Tuning) -> None:
    """Reject values that would break the probability invariants."""
    if not 0.0 <= tuning.softcap_k < 1.0:
        raise ValueError(f"softcap_k must be in [0, 1), got {tuning.softcap_k}")
    if not 0.0 <= tuning.item_chance_cap <= 0.95:
        raise ValueError(f"item_chance_cap must be in [0, 0.95], got {tuning.item_chance_cap}")
    if tuning.max_plants_per_chunk < 1:
        raise ValueError("max_plants_per_chunk must be at least 1")
    if tuning.rare_fallback_min_tier < 1:
        raise ValueError("rare_fallback_min_tier must be at least 1")
    for f in fields(tuning):
        value = getattr(tuning, f.name)
        if value < 0:
            raise ValueError(f"{f.name} must not be negative, got {value}")


def load_tuning(env_file: Optional[str] = None) -> Tuning:
    """Build a Tuning from defaults plus ``CHUNKGEN_*`` environment overrides.

    Args:
        env_file: Optional path to a dotenv file loaded before reading the
            environment.  Existing environment variables win over the file.

    Returns:
        A validated Tuning.

    Raises:
        ValueError: if a variable cannot be parsed or a value is out of range.
    """
    if env_file:
        if os.path.exists(env_file):
            load_dotenv(env_file)
            logger.info(f"Loaded tuning environment from {env_file}")
        else:
            logger.warning(f"Environment file not found: {env_file}")

    overrides = {}
    for f in fields(Tuning):
        var = ENV_PREFIX + f.name.upper()
        raw = os.environ.get(var)
        if raw is None:
            continue
        cast = int if isinstance(f.default, int) else float
        try:
            overrides[f.name] = cast(raw)
        except ValueError:
            raise ValueError(f"Invalid value for {var}: {raw!r}") from None

    tuning = replace(DEFAULT_TUNING, **overrides)
    _validate(tuning)
    if overrides:
        logger.debug(f"Tuning overrides applied: {overrides}")
    return tuning
