"""Structure loot rolls merged into a chunk's item list."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from .base import ChunkItem, ItemDefinition, LootEntry, SpawnCandidate
from .helpers import all_display_names
from .resolver import resolve_item
from .rng import RandomSource

logger = logging.getLogger(__name__)


def _find_existing(
    items: List[ChunkItem],
    entry: LootEntry,
    definition: ItemDefinition,
) -> Optional[ChunkItem]:
    """Match by explicit id, then canonical id, then raw display name."""
    if entry.id:
        for item in items:
            if item.item_id == entry.id:
                return item
    for item in items:
        if item.item_id == definition.id:
            return item
    for item in items:
        if entry.name in all_display_names(item.name):
            return item
    return None


def merge_structure_loot(
    structures: Iterable[SpawnCandidate],
    items: List[ChunkItem],
    item_definitions: Mapping[str, ItemDefinition],
    rng: RandomSource,
) -> List[ChunkItem]:
    """Roll every loot entry of the spawned structures into ``items``.

    A dropped entry adds its quantity to a matching existing item, so the
    same item never appears twice; otherwise it is appended.

    Args:
        structures: Structures selected for the chunk.
        items: Items already spawned; extended in place.
        item_definitions: Registry used to resolve loot names.
        rng: Random source.

    Returns:
        The same ``items`` list.
    """
    for structure in structures:
        for entry in structure.loot:
            if entry.chance is None or rng.random() >= entry.chance:
                continue
            definition = resolve_item(entry.id or entry.name, item_definitions)
            if definition is None:
                logger.warning(f"Loot item {entry.name!r} not found in item registry, dropped")
                continue
            quantity = entry.quantity.roll(rng)
            existing = _find_existing(items, entry, definition)
            if existing is not None:
                existing.quantity += quantity
            elif quantity > 0:
                items.append(ChunkItem.from_definition(definition, quantity))
    return items
