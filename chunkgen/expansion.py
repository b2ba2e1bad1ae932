"""World expansion: materialize chunks lazily as the player roams.

A chunk that already exists is never regenerated.  An absent chunk triggers
generation of a whole region whose terrain is compatible with the
materialized neighbours.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .base import ExpansionResult, GenerationContext, Regions, World, WorldProfile, chunk_key
from .biome import valid_adjacent_terrains
from .region import generate_region
from .rng import weighted_choice

logger = logging.getLogger(__name__)

RegionGenerator = Callable[..., ExpansionResult]


def ensure_chunk_exists(
    pos: Tuple[int, int],
    world: World,
    regions: Regions,
    region_counter: int,
    world_profile: WorldProfile,
    context: GenerationContext,
    season: str = "spring",
    region_generator: Optional[RegionGenerator] = None,
) -> ExpansionResult:
    """Make sure the chunk at ``pos`` exists, generating a region if needed.

    Args:
        pos: (x, y) of the chunk.
        world: Current world map; never mutated.
        regions: Current region map; never mutated.
        region_counter: Next free region id.
        world_profile: World-level tuning passed to the region generator.
        context: Registries (including biomes) and random source.
        season: Current season.
        region_generator: Replacement for the default ``generate_region``;
            called with ``(pos, terrain, world, regions, region_counter,
            world_profile, context, season)``.

    Returns:
        The input state unchanged if the chunk exists, else the region
        generator's result.  Region generator errors propagate.
    """
    x, y = pos
    if chunk_key(x, y) in world:
        return ExpansionResult(world, regions, region_counter)

    terrains = valid_adjacent_terrains(pos, world, context.biomes)
    terrain = weighted_choice(context.rng, [(t, context.biomes[t].spread_weight) for t in terrains])
    logger.info(f"Chunk ({x}, {y}) missing, generating {terrain} region")

    generator = region_generator or generate_region
    result = generator(pos, terrain, dict(world), dict(regions), region_counter, world_profile, context, season)
    result = ExpansionResult(*result)
    if chunk_key(x, y) not in result.world:
        logger.warning(f"Region generator did not materialize ({x}, {y})")
    return result


def generate_chunks_in_radius(
    world: World,
    regions: Regions,
    region_counter: int,
    center: Tuple[int, int],
    radius: int,
    world_profile: WorldProfile,
    context: GenerationContext,
    season: str = "spring",
    region_generator: Optional[RegionGenerator] = None,
) -> ExpansionResult:
    """Ensure every chunk in the square of ``radius`` around ``center`` exists.

    Sweeps x in the outer loop and y in the inner loop, threading the
    updated state through each call.
    """
    cx, cy = center
    state = ExpansionResult(dict(world), dict(regions), region_counter)
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            pos = (cx + dx, cy + dy)
            if chunk_key(*pos) in state.world:
                continue
            state = ensure_chunk_exists(
                pos,
                state.world,
                state.regions,
                state.region_counter,
                world_profile,
                context,
                season,
                region_generator,
            )
    return state
