"""Player-facing actions offered in a chunk."""

from __future__ import annotations

import itertools
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .base import Action, ChunkItem, Enemy
from .helpers import display_name

OBSERVE_ENEMY = "observeAction_enemy"
TALK_TO_NPC = "talkToAction_npc"
PICK_UP_ITEM = "pickUpAction_item"
EXPLORE = "exploreAction"
LISTEN = "listenToSurroundingsAction"


def generate_chunk_actions(
    enemy: Optional[Enemy],
    npcs: Iterable[Mapping[str, Any]],
    items: Iterable[ChunkItem],
    language: str = "en",
) -> List[Action]:
    """Build the ordered action list for a chunk.

    Order: observe the enemy, talk to the first named NPC, pick up each
    item, explore, listen.  Ids count up from 1.
    """
    ids = itertools.count(1)
    actions: List[Action] = []

    if enemy is not None:
        actions.append(Action(next(ids), OBSERVE_ENEMY, {"enemy_type": display_name(enemy.type, language)}))

    for npc in npcs:
        name = display_name(npc.get("name") if npc else None, language)
        if name:
            actions.append(Action(next(ids), TALK_TO_NPC, {"npc_name": name}))
            break

    for item in items:
        params: Dict[str, Any] = {"item_name": display_name(item.name, language)}
        actions.append(Action(next(ids), PICK_UP_ITEM, params))

    actions.append(Action(next(ids), EXPLORE))
    actions.append(Action(next(ids), LISTEN))
    return actions
