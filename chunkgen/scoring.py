"""Per-chunk spawn parameters derived from the resource score.

Each category gets its own gate probability so that NPCs, enemies, plants
and animals stay independent of each other and of the item roll.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from .base import EnvironmentalSnapshot, WorldProfile
from .config import DEFAULT_TUNING, Tuning
from .helpers import clamp, clamp01, resource_score, softcap


class SpawnParameters(NamedTuple):
    score: float
    density: float
    effective_multiplier: float
    max_items: int
    find_chance: float
    npc_chance: float
    enemy_chance: float
    plant_chance: float
    animal_chance: float


def spawn_parameters(
    snapshot: EnvironmentalSnapshot,
    world_profile: WorldProfile,
    tuning: Tuning = DEFAULT_TUNING,
) -> SpawnParameters:
    """Compute item capacity and every gate probability for one chunk.

    Args:
        snapshot: The chunk being populated.
        world_profile: World-level multipliers.
        tuning: Balance constants.

    Returns:
        SpawnParameters with every probability already clamped.
    """
    score = resource_score(snapshot)
    density = world_profile.resource_density
    effective = softcap(world_profile.spawn_multiplier, tuning.softcap_k)
    danger = 0.5 + clamp01(snapshot.danger_level) * 0.8

    count_multiplier = 0.2 + score * 0.5 * density
    max_items = max(1, math.floor(tuning.base_max_items * effective * count_multiplier))
    find_chance = clamp(tuning.base_find_chance * density * (0.6 + score * 0.6) * effective, 0.01, 0.9)

    return SpawnParameters(
        score=score,
        density=density,
        effective_multiplier=effective,
        max_items=max_items,
        find_chance=find_chance,
        npc_chance=clamp(tuning.npc_base_chance * density * (0.5 + score * 0.5) * effective, 0.01, 0.6),
        enemy_chance=clamp(tuning.enemy_base_chance * density * danger * effective, 0.005, 0.5),
        plant_chance=clamp(tuning.plant_base_chance * density * (1 + score) * effective, 0.01, 0.99),
        animal_chance=clamp(tuning.animal_base_chance * density * danger * effective, 0.005, 0.5),
    )
