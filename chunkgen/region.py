"""Default region generator.

A region is a connected blob of chunks sharing one terrain.  It grows
breadth-first from the requested position into cells that are not yet in
the world, samples a snapshot for every cell from the biome's ranges, and
asks the assembler to populate it.  Rocky regions are sometimes walled in.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Tuple

from .assembler import generate_chunk_content
from .base import (
    Chunk,
    ChunkContent,
    EnvironmentalSnapshot,
    ExpansionResult,
    GenerationContext,
    Region,
    Regions,
    World,
    WorldProfile,
    chunk_key,
)
from .biome import NEIGHBOR_OFFSETS, SEASONS, WALL, BiomeDefinition
from .helpers import clamp
from .rng import RandomSource, choice, rand_int, shuffle

logger = logging.getLogger(__name__)

WALLED_TERRAINS = ("cave", "mountain", "volcanic")
WALL_DESCRIPTION = "An impassable rock wall blocks the way."


def dependent_attributes(
    terrain: str,
    biome: BiomeDefinition,
    vegetation: int,
    moisture: int,
    danger: int,
    temperature: int,
    world_profile: WorldProfile,
    season: str,
    rng: RandomSource,
) -> Dict[str, object]:
    """Readings derived from the sampled base values, season and world profile.

    Raises:
        KeyError: if ``season`` is not a known season.
    """
    mods = SEASONS[season]
    if terrain == "cave":
        light = rand_int(rng, -80, -50)
    else:
        light = (
            world_profile.sun_intensity * 10
            + mods.sun_exposure_mod * 10
            - vegetation
            + rand_int(rng, -10, 10)
        )
    return {
        "temperature": clamp(temperature + mods.temperature_mod * 10 + world_profile.temp_bias, -30, 50),
        "moisture": clamp(moisture + mods.moisture_mod * 10 + world_profile.moisture_bias, 0, 100),
        "wind_level": clamp(rand_int(rng, 20, 80) + mods.wind_mod * 10, 0, 100),
        "light_level": clamp(light, -100, 100),
        "explorability": clamp(100 - vegetation / 2 - danger / 2, 0, 100),
        "soil_type": choice(rng, biome.soil_types) or "loamy",
        "travel_cost": max(1, round(biome.travel_cost * 0.33)),
    }


def sample_snapshot(
    terrain: str,
    biome: BiomeDefinition,
    world_profile: WorldProfile,
    season: str,
    rng: RandomSource,
) -> EnvironmentalSnapshot:
    """Draw one chunk's readings from the biome's value ranges."""
    ranges = biome.value_ranges
    base = {name: value_range.roll(rng) for name, value_range in ranges.items()}
    derived = dependent_attributes(
        terrain,
        biome,
        base.get("vegetation_density", 50),
        base.get("moisture", 50),
        base.get("danger_level", 50),
        base.get("temperature", 20),
        world_profile,
        season,
        rng,
    )
    return EnvironmentalSnapshot(terrain=terrain, **{**base, **derived})


def wall_chunk(x: int, y: int, travel_cost: int = 999) -> Chunk:
    """An impassable, pre-explored wall cell outside any region."""
    snapshot = EnvironmentalSnapshot(
        terrain=WALL,
        vegetation_density=0,
        moisture=0,
        elevation=50,
        danger_level=0,
        magic_affinity=0,
        human_presence=0,
        predator_presence=0,
        temperature=50,
        explorability=0,
        travel_cost=travel_cost,
        light_level=0,
        wind_level=0,
        soil_type="rocky",
    )
    return Chunk(
        x=x,
        y=y,
        region_id=-1,
        snapshot=snapshot,
        content=ChunkContent(description=WALL_DESCRIPTION),
        explored=True,
    )


def _flood_fill(start: Tuple[int, int], size: int, world: World, rng: RandomSource):
    """Breadth-first growth into absent cells, shuffling direction order each step."""
    cells: List[Tuple[int, int]] = [start]
    visited = {chunk_key(*start)}
    queue = deque([start])
    while queue and len(cells) < size:
        cx, cy = queue.popleft()
        for dx, dy in shuffle(rng, NEIGHBOR_OFFSETS):
            if len(cells) >= size:
                break
            nxt = (cx + dx, cy + dy)
            key = chunk_key(*nxt)
            if key in visited or key in world:
                continue
            visited.add(key)
            cells.append(nxt)
            queue.append(nxt)
    return cells, visited


def generate_region(
    pos: Tuple[int, int],
    terrain: str,
    world: World,
    regions: Regions,
    region_counter: int,
    world_profile: WorldProfile,
    context: GenerationContext,
    season: str = "spring",
) -> ExpansionResult:
    """Materialize a new region of ``terrain`` starting at ``pos``.

    Args:
        pos: Cell the region grows from; always part of the region.
        terrain: Biome of the new region.
        world: Current world; not mutated.
        regions: Current regions; not mutated.
        region_counter: Next free region id.
        world_profile: World-level tuning.
        context: Registries and random source.
        season: Key into SEASONS.

    Returns:
        ExpansionResult with the new world, regions and counter.
    """
    rng = context.rng
    biome = context.biomes[terrain]
    new_world = dict(world)
    new_regions = dict(regions)

    size = rand_int(rng, biome.min_size, biome.max_size)
    cells, visited = _flood_fill(pos, size, new_world, rng)

    region_id = region_counter
    new_regions[region_id] = Region(terrain=terrain, cells=cells)

    for x, y in cells:
        snapshot = sample_snapshot(terrain, biome, world_profile, season, rng)
        content = generate_chunk_content(snapshot, world_profile, context)
        new_world[chunk_key(x, y)] = Chunk(x=x, y=y, region_id=region_id, snapshot=snapshot, content=content)

    if terrain in WALLED_TERRAINS and rng.random() < context.tuning.border_wall_chance:
        wall = context.biomes.get(WALL)
        wall_cost = wall.travel_cost if wall is not None else 999
        walls = 0
        for x, y in cells:
            for dx, dy in NEIGHBOR_OFFSETS:
                key = chunk_key(x + dx, y + dy)
                if key not in visited and key not in new_world:
                    new_world[key] = wall_chunk(x + dx, y + dy, wall_cost)
                    walls += 1
        logger.debug(f"Walled in region {region_id} with {walls} wall chunks")

    logger.info(f"Generated {terrain} region {region_id} with {len(cells)} chunks at {pos}")
    return ExpansionResult(new_world, new_regions, region_counter + 1)
