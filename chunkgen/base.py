"""Core data types for chunk content generation.

The assembler turns an EnvironmentalSnapshot plus a WorldProfile into a
ChunkContent.  The expansion controller materializes Chunks into the World
map one region at a time.  Nothing here knows about rendering or storage.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from .config import Tuning
from .rng import RandomSource, rand_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

# Authored condition blocks use camelCase keys; map them onto field names.
_CONDITION_ALIASES = {
    "vegetationDensity": "vegetation_density",
    "dangerLevel": "danger_level",
    "magicAffinity": "magic_affinity",
    "humanPresence": "human_presence",
    "predatorPresence": "predator_presence",
    "travelCost": "travel_cost",
    "lightLevel": "light_level",
    "windLevel": "wind_level",
    "soilType": "soil_type",
}


@dataclass(frozen=True)
class EnvironmentalSnapshot:
    """Environmental readings for one chunk.

    Most readings are on a 0-100 scale.  Temperature is in degrees and light
    level runs -100..100.  Readings missing from authored data default to 50.
    """

    terrain: str
    vegetation_density: float = 50
    moisture: float = 50
    elevation: float = 50
    danger_level: float = 50
    magic_affinity: float = 50
    human_presence: float = 50
    predator_presence: float = 50
    temperature: float = 50
    explorability: float = 50
    travel_cost: float = 1
    light_level: float = 50
    wind_level: float = 50
    soil_type: str = "loamy"

    def value_of(self, key: str) -> Any:
        """Look up a reading by field name or camelCase alias; None if unknown."""
        name = _CONDITION_ALIASES.get(key, key)
        if name not in _SNAPSHOT_FIELDS:
            return None
        return getattr(self, name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvironmentalSnapshot":
        """Build a snapshot from snake_case or camelCase keys."""
        kwargs = {}
        for key, value in data.items():
            name = _CONDITION_ALIASES.get(key, key)
            if name in _SNAPSHOT_FIELDS:
                kwargs[name] = value
        return cls(**kwargs)


_SNAPSHOT_FIELDS = frozenset(f.name for f in fields(EnvironmentalSnapshot))


@dataclass(frozen=True)
class WorldProfile:
    """World-level tuning knobs chosen at world creation."""

    spawn_multiplier: float = 1.0  # softcapped before use
    resource_density: float = 1.0  # applied as-is
    temp_bias: float = 0.0
    moisture_bias: float = 0.0
    sun_intensity: float = 5.0


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QuantityRange:
    """Inclusive integer range for item quantities."""

    min: int = 1
    max: int = 1

    def roll(self, rng: RandomSource) -> int:
        return max(0, rand_int(rng, int(self.min), int(self.max)))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], default: int = 1) -> "QuantityRange":
        if not data:
            return cls(default, default)
        low = data.get("min", default)
        return cls(low, data.get("max", low))


@dataclass(frozen=True)
class ItemDefinition:
    """One entry of the item registry."""

    id: str
    name: Any  # plain string or {"en": ..., "vi": ...}
    description: Any = ""
    tier: int = 1
    rarity: Optional[float] = None
    base_quantity: QuantityRange = field(default_factory=QuantityRange)
    emoji: str = ""

    @classmethod
    def from_dict(cls, item_id: str, data: Mapping[str, Any]) -> "ItemDefinition":
        """Build a definition from authored data.

        Tier is coerced to >= 1.  A rarity that is not a number is dropped
        so that it gets derived from the tier instead.
        """
        try:
            tier = max(1, int(data.get("tier", 1)))
        except (TypeError, ValueError):
            tier = 1
        rarity = data.get("rarity")
        if rarity is not None:
            try:
                rarity = float(rarity)
            except (TypeError, ValueError):
                logger.warning(f"Item {item_id} has non-numeric rarity {rarity!r}; deriving it from tier")
                rarity = None
        return cls(
            id=data.get("id", item_id),
            name=data.get("name", item_id),
            description=data.get("description", ""),
            tier=tier,
            rarity=rarity,
            base_quantity=QuantityRange.from_dict(data.get("base_quantity")),
            emoji=data.get("emoji", ""),
        )


@dataclass(frozen=True)
class LootEntry:
    """A possible drop from a structure.  No chance means it never drops."""

    name: str
    id: Optional[str] = None
    chance: Optional[float] = None
    quantity: QuantityRange = field(default_factory=QuantityRange)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LootEntry":
        return cls(
            name=data.get("name", ""),
            id=data.get("id"),
            chance=data.get("chance"),
            quantity=QuantityRange.from_dict(data.get("quantity")),
        )


CANDIDATE_KINDS = ("item", "npc", "enemy", "structure", "plant", "animal")


@dataclass(frozen=True)
class SpawnCandidate:
    """Something that may spawn in a chunk, tagged by ``kind``.

    ``conditions`` is None when the authored entry has no conditions block;
    the selector rejects those.  ``data`` carries the NPC, enemy, creature or
    structure definition the candidate spawns.
    """

    kind: str
    conditions: Optional[Dict[str, Any]] = None
    name: Any = None
    type: Optional[str] = None
    item_id: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    loot: Tuple[LootEntry, ...] = ()

    @classmethod
    def from_template(cls, kind: str, entry: Any) -> Optional["SpawnCandidate"]:
        """Wrap one authored template entry.

        Returns None for an empty entry, and for a malformed one after
        logging a warning.
        """
        if not entry:
            return None
        if isinstance(entry, SpawnCandidate):
            return entry
        if kind not in CANDIDATE_KINDS:
            raise ValueError(f"Unknown candidate kind: {kind}")
        if not isinstance(entry, Mapping):
            logger.warning(f"Skipping malformed {kind} entry: {entry!r}")
            return None
        conditions = entry.get("conditions")
        if conditions is not None and not isinstance(conditions, Mapping):
            logger.warning(f"Ignoring malformed conditions on {kind} entry: {conditions!r}")
            conditions = None
        data = entry.get("data")
        return cls(
            kind=kind,
            conditions=dict(conditions) if conditions is not None else None,
            name=entry.get("name"),
            type=entry.get("type"),
            item_id=entry.get("id"),
            data=dict(data) if isinstance(data, Mapping) else None,
            loot=tuple(LootEntry.from_dict(loot) for loot in entry.get("loot") or () if isinstance(loot, Mapping)),
        )

    @property
    def base_chance(self) -> float:
        if not self.conditions:
            return 1.0
        chance = self.conditions.get("chance")
        if isinstance(chance, bool) or not isinstance(chance, (int, float)):
            return 1.0
        return float(chance)

    @property
    def identity(self) -> Any:
        """Payload name/type, else the candidate's own name/type."""
        source = self.data if self.data else {}
        return source.get("name") or source.get("type") or self.name or self.type

    @property
    def lookup_key(self) -> Any:
        """Key used to resolve the candidate against the item registry."""
        return self.item_id or self.name or self.type


# ---------------------------------------------------------------------------
# Generated content
# ---------------------------------------------------------------------------


@dataclass
class ChunkItem:
    name: Any
    description: Any
    tier: int
    quantity: int
    emoji: str = ""
    item_id: Optional[str] = None

    @classmethod
    def from_definition(cls, definition: ItemDefinition, quantity: int) -> "ChunkItem":
        return cls(
            name=definition.name,
            description=definition.description,
            tier=definition.tier,
            quantity=quantity,
            emoji=definition.emoji,
            item_id=definition.id,
        )


@dataclass(frozen=True)
class SenseEffect:
    range: int = 3
    type: str = "detection"


def _or_default(data: Mapping[str, Any], key: str, default: Any) -> Any:
    """``data[key]`` unless it is missing or None."""
    value = data.get(key)
    return default if value is None else value


@dataclass
class Enemy:
    """The single hostile occupant of a chunk."""

    type: Any
    hp: int = 100
    damage: int = 10
    behavior: str = "aggressive"
    size: str = "medium"
    emoji: str = "👾"
    satiation: int = 0
    max_satiation: int = 100
    diet: List[str] = field(default_factory=lambda: ["meat"])
    sense_effect: Optional[SenseEffect] = None

    @classmethod
    def from_creature(cls, data: Mapping[str, Any], default_emoji: str = "👾") -> "Enemy":
        """Build an enemy from an enemy payload or a creature definition.

        Creature definitions carry no ``type``; their display name (or id)
        stands in for it.
        """
        from .helpers import display_name

        sense = None
        if data.get("sense_effect"):
            sense = SenseEffect(range=data.get("sense_radius") or 3)
        return cls(
            type=data.get("type") or display_name(data.get("name")) or data.get("id"),
            hp=_or_default(data, "hp", 100),
            damage=_or_default(data, "damage", 10),
            behavior=_or_default(data, "behavior", "aggressive"),
            size=_or_default(data, "size", "medium"),
            emoji=data.get("emoji") or default_emoji,
            max_satiation=_or_default(data, "max_satiation", 100),
            diet=list(data.get("diet") or ["meat"]),
            sense_effect=sense,
        )


@dataclass
class PlantInstance:
    definition: Dict[str, Any]
    hp: int = 0
    maturity: int = 0
    age: int = 0


@dataclass(frozen=True)
class Action:
    id: int
    text_key: str
    params: Dict[str, Any] = field(default_factory=dict)


PLACEHOLDER_DESCRIPTION = "An unknown and undescribable area."


@dataclass
class ChunkContent:
    """Everything that exists in one chunk."""

    description: str
    npcs: List[Dict[str, Any]] = field(default_factory=list)
    items: List[ChunkItem] = field(default_factory=list)
    structures: List[SpawnCandidate] = field(default_factory=list)
    enemy: Optional[Enemy] = None
    actions: List[Action] = field(default_factory=list)
    plants: List[PlantInstance] = field(default_factory=list)

    @classmethod
    def placeholder(cls) -> "ChunkContent":
        """Content for a terrain with no template: empty but usable."""
        return cls(description=PLACEHOLDER_DESCRIPTION)


# ---------------------------------------------------------------------------
# World state
# ---------------------------------------------------------------------------


def chunk_key(x: int, y: int) -> str:
    return f"{x},{y}"


@dataclass
class Chunk:
    """One materialized cell of the world grid."""

    x: int
    y: int
    region_id: int
    snapshot: EnvironmentalSnapshot
    content: ChunkContent
    explored: bool = False
    last_visited: int = 0

    @property
    def terrain(self) -> str:
        return self.snapshot.terrain


@dataclass
class Region:
    terrain: str
    cells: List[Tuple[int, int]] = field(default_factory=list)


World = Dict[str, Chunk]
Regions = Dict[int, Region]


class ExpansionResult(NamedTuple):
    """World state after materializing a chunk or region."""

    world: World
    regions: Regions
    region_counter: int


# ---------------------------------------------------------------------------
# Generation context
# ---------------------------------------------------------------------------


@dataclass
class GenerationContext:
    """Read-only registries and the random source for one generation run.

    ``biomes`` maps terrain name to a ``biome.BiomeDefinition``; it is only
    read by the expansion controller and the region generator.
    """

    terrain_templates: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    item_definitions: Mapping[str, ItemDefinition] = field(default_factory=dict)
    creature_definitions: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    custom_items: Sequence[Mapping[str, Any]] = ()
    custom_structures: Sequence[Mapping[str, Any]] = ()
    biomes: Mapping[str, Any] = field(default_factory=dict)
    language: str = "en"
    rng: RandomSource = field(default_factory=random.Random)
    tuning: Tuning = field(default_factory=Tuning)

    @classmethod
    def default(cls, seed: Optional[int] = None, **overrides: Any) -> "GenerationContext":
        """Context backed by the built-in templates and biome table.

        Args:
            seed: Seed for a fresh ``random.Random``; ignored when ``rng`` is
                given in ``overrides``.
            **overrides: Any field to replace, e.g. ``tuning=load_tuning()``.
        """
        from .biome import BIOMES
        from .resolver import build_item_registry
        from .templates import CREATURE_DEFINITIONS, ITEM_DEFINITIONS, TERRAIN_TEMPLATES

        values: Dict[str, Any] = {
            "terrain_templates": TERRAIN_TEMPLATES,
            "item_definitions": build_item_registry(ITEM_DEFINITIONS),
            "creature_definitions": CREATURE_DEFINITIONS,
            "biomes": BIOMES,
            "rng": random.Random(seed),
        }
        values.update(overrides)
        return cls(**values)
