"""Item registry helpers: build, resolve by id or name, derive rarity."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .base import ChunkItem, ItemDefinition, SpawnCandidate
from .helpers import all_display_names, clamp, display_name
from .rng import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_RARITY = 0.2
MIN_RARITY = 0.05


def build_item_registry(raw: Mapping[str, Mapping[str, Any]]) -> Dict[str, ItemDefinition]:
    """Turn authored item data keyed by id into ItemDefinitions."""
    return {item_id: ItemDefinition.from_dict(item_id, data) for item_id, data in raw.items()}


def resolve_item(key: Any, item_definitions: Mapping[str, ItemDefinition]) -> Optional[ItemDefinition]:
    """Find a definition by registry id, then by display name in any language.

    Args:
        key: An id, a display string, or a per-language name mapping.
        item_definitions: The registry to search.

    Returns:
        The matching definition, or None.
    """
    if key is None:
        return None
    names = all_display_names(key)
    for name in names:
        definition = item_definitions.get(name)
        if definition is not None:
            return definition
    wanted = set(names)
    for definition in item_definitions.values():
        if wanted.intersection(all_display_names(definition.name)):
            return definition
    return None


def derive_rarity(definition: Optional[ItemDefinition]) -> float:
    """Explicit rarity, else inferred from tier, else a moderate default.

    Tier 1 maps to 1.0 and each tier above removes 0.15, floored at 0.05.
    """
    if definition is None:
        rarity = DEFAULT_RARITY
    elif definition.rarity is not None:
        rarity = definition.rarity
    else:
        rarity = max(MIN_RARITY, 1 - (definition.tier - 1) * 0.15)
    return clamp(rarity, MIN_RARITY, 1.0)


def resolve_spawned_items(
    candidates: Iterable[SpawnCandidate],
    item_definitions: Mapping[str, ItemDefinition],
    rng: RandomSource,
) -> List[ChunkItem]:
    """Materialize selected item candidates, rolling each quantity.

    Unresolvable candidates are dropped with a warning; zero quantities
    are dropped silently.
    """
    items: List[ChunkItem] = []
    for candidate in candidates:
        definition = resolve_item(candidate.lookup_key, item_definitions)
        if definition is None:
            logger.warning(f"Item definition not found for {display_name(candidate.lookup_key)!r}")
            continue
        quantity = definition.base_quantity.roll(rng)
        if quantity <= 0:
            logger.debug(f"Rolled zero quantity for {definition.id}, not spawned")
            continue
        items.append(ChunkItem.from_definition(definition, quantity))
    return items
