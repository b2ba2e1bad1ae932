"""Biome configuration, season modifiers and terrain adjacency.

Each biome describes how big its regions grow, how likely it is to be
picked when the world expands, which biomes may border it, and the ranges
its chunks' environmental readings are sampled from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

from .base import World, chunk_key
from .rng import RandomSource, rand_int

WALL = "wall"
FALLBACK_TERRAINS = ("grassland", "forest")

# Four-neighbourhood, in the order regions flood-fill.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(frozen=True)
class ValueRange:
    min: int
    max: int

    def roll(self, rng: RandomSource) -> int:
        return rand_int(rng, self.min, self.max)


@dataclass(frozen=True)
class BiomeDefinition:
    min_size: int
    max_size: int
    travel_cost: int
    spread_weight: float
    allowed_neighbors: Tuple[str, ...]
    value_ranges: Dict[str, ValueRange] = field(default_factory=dict)
    soil_types: Tuple[str, ...] = ("loamy",)


@dataclass(frozen=True)
class SeasonModifiers:
    temperature_mod: float
    moisture_mod: float
    sun_exposure_mod: float
    wind_mod: float


SEASONS: Dict[str, SeasonModifiers] = {
    "spring": SeasonModifiers(0.1, 2, 1, 1),
    "summer": SeasonModifiers(0.2, -1, 3, 0),
    "autumn": SeasonModifiers(-0.1, 1, -1, 2),
    "winter": SeasonModifiers(-0.25, -2, -3, 3),
}

_RANGE_FIELDS = (
    "vegetation_density",
    "moisture",
    "elevation",
    "danger_level",
    "magic_affinity",
    "human_presence",
    "predator_presence",
    "temperature",
)


def _biome(size, travel_cost, spread_weight, neighbors, ranges, soil) -> BiomeDefinition:
    """Compact constructor: ranges are (min, max) pairs in _RANGE_FIELDS order."""
    return BiomeDefinition(
        min_size=size[0],
        max_size=size[1],
        travel_cost=travel_cost,
        spread_weight=spread_weight,
        allowed_neighbors=tuple(neighbors),
        value_ranges={name: ValueRange(*pair) for name, pair in zip(_RANGE_FIELDS, ranges)},
        soil_types=tuple(soil),
    )


# fmt: off
BIOMES: Dict[str, BiomeDefinition] = {
    # size, travel cost, spread weight, neighbours, value ranges, soil types
    "forest": _biome(
        (10, 25), 4, 0.6, ["grassland", "mountain", "swamp", "jungle", "wall", "tundra", "mushroom_forest"],
        [(70, 100), (50, 80), (10, 40), (40, 70), (30, 60), (0, 30), (50, 80), (10, 25)], ["loamy"]),
    "grassland": _biome(
        (15, 30), 1, 0.8, ["forest", "desert", "swamp", "jungle", "wall", "beach", "mesa"],
        [(20, 50), (20, 50), (0, 20), (10, 40), (0, 20), (20, 60), (20, 50), (15, 30)], ["loamy", "sandy"]),
    "desert": _biome(
        (12, 28), 3, 0.4, ["grassland", "mountain", "volcanic", "wall", "mesa", "beach"],
        [(0, 10), (0, 10), (0, 30), (50, 80), (10, 40), (0, 20), (60, 90), (35, 50)], ["sandy"]),
    "swamp": _biome(
        (10, 20), 5, 0.2, ["forest", "grassland", "jungle", "wall", "floptropica", "beach", "mushroom_forest"],
        [(50, 80), (80, 100), (-10, 10), (70, 100), (40, 70), (0, 10), (70, 100), (20, 32)], ["clay"]),
    "mountain": _biome(
        (10, 20), 6, 0.1, ["forest", "desert", "volcanic", "wall", "cave", "tundra"],
        [(10, 40), (20, 50), (50, 100), (60, 90), (20, 50), (10, 40), (40, 70), (-5, 15)], ["rocky"]),
    "cave": _biome(
        (15, 30), 7, 0.05, ["mountain", "wall", "mushroom_forest", "underwater"],
        [(0, 20), (60, 90), (-100, -10), (80, 100), (50, 80), (0, 30), (80, 100), (5, 15)], ["rocky"]),
    "jungle": _biome(
        (12, 25), 5, 0.5, ["forest", "swamp", "grassland", "wall", "floptropica", "beach"],
        [(90, 100), (80, 100), (10, 30), (60, 90), (40, 80), (0, 40), (70, 100), (28, 40)], ["loamy", "clay"]),
    "volcanic": _biome(
        (8, 18), 8, 0.1, ["mountain", "desert", "wall"],
        [(0, 10), (0, 10), (40, 80), (90, 100), (60, 100), (0, 10), (90, 100), (40, 50)], ["rocky"]),
    "floptropica": _biome(
        (10, 20), 2, 0.01, ["jungle", "swamp", "wall", "beach"],
        [(80, 100), (70, 90), (10, 30), (50, 80), (80, 100), (50, 100), (60, 90), (30, 45)], ["loamy", "clay"]),
    "tundra": _biome(
        (15, 30), 4, 0.3, ["mountain", "forest", "wall", "beach"],
        [(10, 30), (10, 40), (20, 50), (30, 60), (10, 30), (0, 20), (40, 70), (-20, 0)], ["rocky", "loamy"]),
    "beach": _biome(
        (8, 18), 2, 0.5, ["grassland", "desert", "jungle", "swamp", "floptropica", "tundra", "wall", "ocean"],
        [(0, 20), (40, 70), (0, 10), (10, 30), (0, 20), (10, 50), (10, 40), (18, 28)], ["sandy"]),
    "mesa": _biome(
        (10, 25), 4, 0.3, ["desert", "grassland", "wall"],
        [(10, 30), (10, 30), (30, 60), (40, 70), (10, 40), (0, 30), (30, 60), (30, 45)], ["sandy", "rocky"]),
    "mushroom_forest": _biome(
        (10, 20), 4, 0.15, ["forest", "swamp", "cave", "wall"],
        [(60, 90), (70, 90), (-20, 20), (50, 80), (70, 100), (0, 10), (40, 70), (8, 18)], ["loamy", "clay"]),
    "ocean": _biome(
        (20, 40), 99, 0.2, ["beach", "wall", "underwater"],
        [(0, 0), (100, 100), (-50, -10), (40, 70), (10, 40), (0, 20), (70, 100), (12, 25)], ["sandy"]),
    "wall": _biome(
        (1, 1), 999, 0, ["forest", "grassland", "desert", "swamp", "mountain", "cave", "jungle", "volcanic",
                         "wall", "floptropica", "tundra", "beach", "mesa", "mushroom_forest", "ocean", "city",
                         "space_station", "underwater"],
        [(0, 0), (0, 0), (50, 50), (0, 0), (0, 0), (0, 0), (0, 0), (20, 20)], ["rocky"]),
    "city": _biome(
        (15, 30), 1, 0.5, ["grassland", "wall", "beach"],
        [(0, 20), (10, 40), (0, 20), (30, 80), (10, 50), (80, 100), (10, 30), (10, 25)], ["rocky", "sandy"]),
    "space_station": _biome(
        (20, 35), 2, 0.1, ["wall"],
        [(0, 10), (0, 10), (100, 100), (50, 90), (20, 60), (10, 100), (20, 50), (18, 24)], ["metal"]),
    "underwater": _biome(
        (15, 30), 6, 0.2, ["ocean", "wall", "cave"],
        [(30, 80), (100, 100), (-100, -30), (60, 90), (50, 90), (0, 30), (60, 90), (10, 20)], ["sandy", "rocky"]),
}
# fmt: on


def valid_adjacent_terrains(
    pos: Tuple[int, int],
    world: World,
    biomes: Mapping[str, BiomeDefinition],
) -> List[str]:
    """Terrains a new region at ``pos`` may take given its materialized neighbours.

    With no neighbours every terrain except wall is valid.  Otherwise a
    terrain must be allowed by every neighbour.  Wall is never chosen here;
    an empty result falls back to grassland/forest.
    """
    x, y = pos
    neighbor_terrains = []
    for dx, dy in NEIGHBOR_OFFSETS:
        chunk = world.get(chunk_key(x + dx, y + dy))
        if chunk is not None:
            neighbor_terrains.append(chunk.terrain)

    if not neighbor_terrains:
        return [terrain for terrain in biomes if terrain != WALL]

    valid = None
    for terrain in neighbor_terrains:
        biome = biomes.get(terrain)
        allowed = set(biome.allowed_neighbors) if biome is not None else set()
        valid = allowed if valid is None else valid & allowed

    # Keep table order so a seeded draw is reproducible.
    result = [terrain for terrain in biomes if terrain in valid and terrain != WALL]
    if result:
        return result
    fallback = [terrain for terrain in FALLBACK_TERRAINS if terrain in biomes]
    return fallback or [terrain for terrain in biomes if terrain != WALL]
