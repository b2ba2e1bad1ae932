"""Chunk content assembly.

Given a chunk's EnvironmentalSnapshot this decides everything that exists
in it: description, items, NPCs, at most one enemy, up to two structures,
plants, and the actions offered to the player.

Items use a budgeted multi-stage pipeline so that rich chunks are not
flooded with loot:

1. a per-chunk find gate decides whether items roll at all;
2. a random sample of the pool is checked against a rarity budget;
3. survivors roll with a chance that shrinks as more of them survive;
4. very high-tier items keep a small fallback chance.

NPCs, enemies, plants and animals each have their own independent gate.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional

from .actions import generate_chunk_actions
from .base import (
    ChunkContent,
    EnvironmentalSnapshot,
    Enemy,
    GenerationContext,
    PlantInstance,
    SpawnCandidate,
    WorldProfile,
)
from .candidates import CandidatePools, prepare_candidates
from .helpers import clamp
from .loot import merge_structure_loot
from .resolver import derive_rarity, resolve_item, resolve_spawned_items
from .rng import choice, rand_int, sample, shuffle
from .scoring import SpawnParameters, spawn_parameters
from .selector import select_entities

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTIONS = ["A generic area."]
DEFAULT_ADJECTIVES = ["normal"]
DEFAULT_FEATURES = ["nothing special"]

ENEMY_EMOJI = "👾"
ANIMAL_EMOJI = "🐾"


# ---------------------------------------------------------------------------
# Description
# ---------------------------------------------------------------------------


def describe(template: Mapping[str, Any], rng) -> str:
    """Fill a random description template with a random adjective and feature.

    Empty entries are dropped; a list with nothing left uses the defaults.
    """
    text = choice(rng, _vocabulary(template, "descriptions") or DEFAULT_DESCRIPTIONS)
    adjective = choice(rng, _vocabulary(template, "adjectives") or DEFAULT_ADJECTIVES)
    feature = choice(rng, _vocabulary(template, "features") or DEFAULT_FEATURES)
    return text.replace("[adjective]", adjective, 1).replace("[feature]", feature, 1)


def _vocabulary(template: Mapping[str, Any], key: str) -> List[str]:
    return [str(entry) for entry in template.get(key) or () if entry]


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


def select_item_candidates(
    candidates: List[SpawnCandidate],
    params: SpawnParameters,
    context: GenerationContext,
) -> List[SpawnCandidate]:
    """Run the budgeted item pipeline and return the spawned candidates.

    Never returns more than ``params.max_items`` candidates.
    """
    rng = context.rng
    tuning = context.tuning
    definitions = context.item_definitions

    if rng.random() >= params.find_chance:
        logger.debug(f"Item find gate failed (find_chance={params.find_chance:.4f})")
        return []

    pool = [c for c in candidates if c]
    sample_size = min(6 + math.floor(math.log(max(1, len(pool)))), len(pool))
    sampled = sample(rng, pool, sample_size)

    # Budget pass: rarer items cost more of the chunk's budget.
    budget = 1.0 * params.density
    affordable = []
    for candidate in sampled:
        rarity = derive_rarity(resolve_item(candidate.lookup_key, definitions))
        cost = (1 / max(0.05, rarity)) * tuning.cost_scale
        if budget - cost >= 0:
            affordable.append((candidate, rarity))
            budget -= cost

    scale = 1 / (0.5 + len(affordable) ** 0.6)
    spawned: List[SpawnCandidate] = []
    for candidate, rarity in affordable:
        chance = candidate.base_chance * rarity * params.density * params.effective_multiplier * scale
        if rng.random() < clamp(chance, 0.0, tuning.item_chance_cap):
            spawned.append(candidate)
        if len(spawned) >= params.max_items:
            break

    if not spawned and sampled:
        _rare_fallback(sampled, spawned, params, context)

    logger.debug(
        f"Item pipeline: pool={len(pool)} sampled={len(sampled)} "
        f"affordable={len(affordable)} spawned={len(spawned)} budget_left={budget:.3f}"
    )
    return spawned


def _rare_fallback(sampled, spawned, params: SpawnParameters, context: GenerationContext) -> None:
    """Give the highest-tier sampled item a small chance when nothing spawned."""
    best: Optional[SpawnCandidate] = None
    best_tier = -1
    for candidate in sampled:
        definition = resolve_item(candidate.lookup_key, context.item_definitions)
        tier = definition.tier if definition is not None else 0
        if tier > best_tier:
            best, best_tier = candidate, tier

    tuning = context.tuning
    if best is None or best_tier < tuning.rare_fallback_min_tier:
        return
    chance = tuning.rare_fallback_chance * params.density * params.effective_multiplier
    if context.rng.random() < chance:
        spawned.append(best)
        logger.debug(f"Rare fallback spawned tier {best_tier} item (chance={chance:.4f})")


# ---------------------------------------------------------------------------
# Creatures
# ---------------------------------------------------------------------------


def _spawn_plants(pools: CandidatePools, params: SpawnParameters, context: GenerationContext) -> List[PlantInstance]:
    rng = context.rng
    if rng.random() >= params.plant_chance or not pools.plants:
        return []
    limit = min(context.tuning.max_plants_per_chunk, 18)
    count = rand_int(rng, 1, limit)
    plants = []
    for candidate in shuffle(rng, pools.plants)[:count]:
        if candidate.data:
            plants.append(PlantInstance(definition=candidate.data, hp=candidate.data.get("hp") or 0))
    return plants


def _spawn_animal(pools: CandidatePools, params: SpawnParameters, context: GenerationContext) -> Optional[SpawnCandidate]:
    rng = context.rng
    if rng.random() >= params.animal_chance or not pools.animals:
        return None
    return choice(rng, pools.animals)


def _enemy_from(candidate: SpawnCandidate) -> Enemy:
    emoji = ANIMAL_EMOJI if candidate.kind == "animal" else ENEMY_EMOJI
    data = candidate.data or {"type": candidate.type or candidate.name}
    return Enemy.from_creature(data, default_emoji=emoji)


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def generate_chunk_content(
    snapshot: EnvironmentalSnapshot,
    world_profile: WorldProfile,
    context: GenerationContext,
) -> ChunkContent:
    """Decide everything that exists in one chunk.

    Args:
        snapshot: Environmental readings of the chunk; its terrain selects
            the template.
        world_profile: World-level spawn and density multipliers.
        context: Registries, language and random source.

    Returns:
        The chunk's ChunkContent.  A terrain with no template yields the
        placeholder content rather than an error.
    """
    template = context.terrain_templates.get(snapshot.terrain)
    if template is None:
        logger.error(f"No template found for terrain: {snapshot.terrain}")
        return ChunkContent.placeholder()

    rng = context.rng
    description = describe(template, rng)
    params = spawn_parameters(snapshot, world_profile, context.tuning)
    pools = prepare_candidates(snapshot.terrain, template, context)

    item_refs = select_item_candidates(pools.items, params, context)
    items = resolve_spawned_items(item_refs, context.item_definitions, rng)

    npcs = []
    if rng.random() < params.npc_chance:
        chosen = select_entities(pools.npcs, 1, snapshot, context.item_definitions, world_profile, rng, context.tuning)
        npcs = [c.data or {"name": c.name} for c in chosen]
    else:
        logger.debug(f"NPC gate failed (npc_chance={params.npc_chance:.4f})")

    enemy = None
    if rng.random() < params.enemy_chance:
        chosen = select_entities(pools.enemies, 1, snapshot, context.item_definitions, world_profile, rng, context.tuning)
        if chosen:
            enemy = _enemy_from(chosen[0])
    else:
        logger.debug(f"Enemy gate failed (enemy_chance={params.enemy_chance:.4f})")

    structures = select_entities(pools.structures, 2, snapshot, context.item_definitions, world_profile, rng, context.tuning)
    merge_structure_loot(structures, items, context.item_definitions, rng)

    plants = _spawn_plants(pools, params, context)
    animal = _spawn_animal(pools, params, context)
    if animal is not None and enemy is None:
        enemy = _enemy_from(animal)

    actions = generate_chunk_actions(enemy, npcs, items, context.language)

    logger.debug(
        f"Assembled {snapshot.terrain} chunk: {len(items)} items, {len(npcs)} npcs, "
        f"enemy={'yes' if enemy else 'no'}, {len(structures)} structures, {len(plants)} plants"
    )
    return ChunkContent(
        description=description,
        npcs=npcs,
        items=items,
        structures=structures,
        enemy=enemy,
        actions=actions,
        plants=plants,
    )
