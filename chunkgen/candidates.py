"""Candidate pool construction for one chunk.

Pools are built once per assembly from the terrain template, the custom
item and structure catalogs, and the creature registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .base import GenerationContext, SpawnCandidate
from .helpers import display_name

logger = logging.getLogger(__name__)

DEFAULT_NATURAL_CHANCE = 0.5


@dataclass
class CandidatePools:
    items: List[SpawnCandidate] = field(default_factory=list)
    npcs: List[SpawnCandidate] = field(default_factory=list)
    enemies: List[SpawnCandidate] = field(default_factory=list)
    structures: List[SpawnCandidate] = field(default_factory=list)
    plants: List[SpawnCandidate] = field(default_factory=list)
    animals: List[SpawnCandidate] = field(default_factory=list)


def _wrap(kind: str, entries: Optional[Iterable[Any]]) -> List[SpawnCandidate]:
    """Wrap template entries, dropping empty ones."""
    wrapped = (SpawnCandidate.from_template(kind, entry) for entry in entries or ())
    return [candidate for candidate in wrapped if candidate is not None]


def _spawns_in(entry: Mapping[str, Any], terrain: str) -> bool:
    """Custom catalog entries opt in per biome and can be switched off."""
    if not isinstance(entry, Mapping):
        if entry:
            logger.warning(f"Skipping malformed catalog entry: {entry!r}")
        return False
    return bool(entry) and entry.get("spawn_enabled", True) is not False and terrain in (entry.get("spawn_biomes") or ())


def _natural_spawn(entry: Mapping[str, Any], terrain: str) -> Optional[Mapping[str, Any]]:
    for spawn in entry.get("natural_spawn") or ():
        if isinstance(spawn, Mapping) and spawn.get("biome") == terrain:
            return spawn
    return None


def _static_items(template: Mapping[str, Any]) -> List[SpawnCandidate]:
    """Template items; a missing chance means the item always qualifies."""
    items = []
    for entry in template.get("items") or ():
        if isinstance(entry, Mapping):
            conditions = entry.get("conditions")
            conditions = dict(conditions) if isinstance(conditions, Mapping) else {}
            conditions.setdefault("chance", 1.0)
            entry = {**entry, "conditions": conditions}
        candidate = SpawnCandidate.from_template("item", entry)
        if candidate is not None:
            items.append(candidate)
    return items


def _custom_items(terrain: str, catalog: Iterable[Mapping[str, Any]]) -> List[SpawnCandidate]:
    items = []
    for entry in catalog:
        if not _spawns_in(entry, terrain):
            continue
        spawn = _natural_spawn(entry, terrain) or {}
        conditions = dict(spawn.get("conditions") or {})
        conditions["chance"] = spawn.get("chance", DEFAULT_NATURAL_CHANCE)
        items.append(
            SpawnCandidate(
                kind="item",
                conditions=conditions,
                name=display_name(entry.get("name"), "en"),
                item_id=entry.get("id"),
            )
        )
    return items


def _custom_structures(terrain: str, catalog: Iterable[Mapping[str, Any]]) -> List[SpawnCandidate]:
    return _wrap("structure", (entry for entry in catalog if _spawns_in(entry, terrain)))


def _creature_candidates(terrain: str, creatures: Mapping[str, Mapping[str, Any]]) -> Dict[str, List[SpawnCandidate]]:
    """One candidate per matching natural spawn entry, split plant/animal."""
    pools: Dict[str, List[SpawnCandidate]] = {"plant": [], "animal": []}
    for creature_id, creature in creatures.items():
        if not isinstance(creature, Mapping):
            continue
        kind = "plant" if creature.get("plant_properties") else "animal"
        name = creature.get("id") or display_name(creature.get("name"), "en") or creature_id
        for spawn in creature.get("natural_spawn") or ():
            if not isinstance(spawn, Mapping) or spawn.get("biome") != terrain:
                continue
            conditions = dict(spawn.get("conditions") or {})
            conditions["chance"] = spawn.get("chance", DEFAULT_NATURAL_CHANCE)
            pools[kind].append(SpawnCandidate(kind=kind, conditions=conditions, name=name, data=dict(creature)))
    return pools


def prepare_candidates(terrain: str, template: Mapping[str, Any], context: GenerationContext) -> CandidatePools:
    """Build every candidate pool for a chunk of the given terrain.

    Args:
        terrain: Terrain name of the chunk.
        template: The terrain's template (items, NPCs, enemies, creatures,
            structures).
        context: Supplies the custom catalogs and creature registry.

    Returns:
        CandidatePools.  The enemy pool already includes legacy template
        creatures and the animal pool.
    """
    creatures = _creature_candidates(terrain, context.creature_definitions)
    pools = CandidatePools(
        items=_static_items(template) + _custom_items(terrain, context.custom_items),
        npcs=_wrap("npc", template.get("npcs")),
        enemies=_wrap("enemy", template.get("enemies")) + _wrap("enemy", template.get("creatures")),
        structures=_wrap("structure", template.get("structures")) + _custom_structures(terrain, context.custom_structures),
        plants=creatures["plant"],
        animals=creatures["animal"],
    )
    pools.enemies.extend(pools.animals)
    logger.debug(
        f"Candidate pools for {terrain}: {len(pools.items)} items, {len(pools.npcs)} npcs, "
        f"{len(pools.enemies)} enemies, {len(pools.structures)} structures, "
        f"{len(pools.plants)} plants, {len(pools.animals)} animals"
    )
    return pools
