"""Probabilistic selection of spawn candidates.

Used for NPCs, enemies and structures.  Items go through the budgeted
pipeline in ``assembler`` instead.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from .base import EnvironmentalSnapshot, ItemDefinition, SpawnCandidate, WorldProfile
from .conditions import eligible
from .config import DEFAULT_TUNING, Tuning
from .helpers import clamp, resource_score, softcap
from .rng import RandomSource, shuffle

logger = logging.getLogger(__name__)


def spawn_chance(
    candidate: SpawnCandidate,
    score: float,
    item_definitions: Mapping[str, ItemDefinition],
    world_profile: WorldProfile,
    tuning: Tuning = DEFAULT_TUNING,
) -> float:
    """Per-candidate spawn probability, clamped to [0, item_chance_cap].

    Higher tiers are penalized by 0.9 per tier above 1 when the candidate
    names a registered item; richer chunks scale the chance by 0.6..1.4.
    """
    chance = candidate.base_chance
    identity = candidate.identity
    definition = item_definitions.get(identity) if isinstance(identity, str) else None
    if definition is not None:
        chance *= 0.9 ** (definition.tier - 1)
    chance *= world_profile.resource_density
    chance *= 0.6 + 0.8 * score
    chance *= softcap(world_profile.spawn_multiplier, tuning.softcap_k)
    return clamp(chance, 0.0, tuning.item_chance_cap)


def select_entities(
    candidates: Iterable[Optional[SpawnCandidate]],
    capacity: int,
    snapshot: EnvironmentalSnapshot,
    item_definitions: Mapping[str, ItemDefinition],
    world_profile: WorldProfile,
    rng: RandomSource,
    tuning: Optional[Tuning] = None,
) -> List[SpawnCandidate]:
    """Pick up to ``capacity`` candidates that pass their conditions and a roll.

    Args:
        candidates: Candidate pool; None entries are ignored.
        capacity: Maximum number to return.
        snapshot: The chunk being populated.
        item_definitions: Registry used to look up tiers.
        world_profile: World-level multipliers.
        rng: Random source.
        tuning: Balance constants, defaults when omitted.

    Returns:
        Selected candidates, at most ``capacity`` of them.
    """
    if capacity <= 0:
        return []
    tuning = tuning or DEFAULT_TUNING

    pool = []
    for candidate in candidates:
        if not candidate:
            continue
        if candidate.conditions is None:
            logger.error(f"Candidate {candidate.identity!r} has no conditions block, skipping")
            continue
        if eligible(candidate.conditions, snapshot):
            pool.append(candidate)

    score = resource_score(snapshot)
    selected: List[SpawnCandidate] = []
    for candidate in shuffle(rng, pool):
        if len(selected) >= capacity:
            break
        if not candidate.identity:
            logger.error(f"Candidate of kind {candidate.kind} has no name or type, skipping")
            continue
        chance = spawn_chance(candidate, score, item_definitions, world_profile, tuning)
        if rng.random() < chance:
            selected.append(candidate)

    logger.debug(f"Selected {len(selected)} of {len(pool)} eligible candidates (capacity {capacity})")
    return selected
