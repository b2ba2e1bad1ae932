"""Built-in terrain templates, item registry and creature registry.

These are sample catalogs: enough to populate every terrain a default world
starts with.  Callers with their own content pass their own registries in
the GenerationContext instead.

Condition blocks map snapshot readings to ``{"min", "max"}`` ranges;
``chance`` is the candidate's base spawn chance.
"""

from typing import Any, Dict

# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

ITEM_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "stone": {
        "name": "Stone",
        "description": "A fist-sized rock.",
        "tier": 1,
        "base_quantity": {"min": 1, "max": 3},
        "emoji": "🪨",
    },
    "stick": {
        "name": "Stick",
        "description": "A dry branch, good for kindling.",
        "tier": 1,
        "base_quantity": {"min": 1, "max": 4},
        "emoji": "🪵",
    },
    "healing_herb": {
        "name": {"en": "Healing Herb", "vi": "Thảo dược chữa lành"},
        "description": "A bitter leaf that closes small wounds.",
        "tier": 2,
        "base_quantity": {"min": 1, "max": 2},
        "emoji": "🌿",
    },
    "wild_berries": {
        "name": "Wild Berries",
        "description": "A handful of tart berries.",
        "tier": 1,
        "base_quantity": {"min": 2, "max": 5},
        "emoji": "🫐",
    },
    "mushroom": {
        "name": "Mushroom",
        "description": "Probably edible.",
        "tier": 1,
        "rarity": 0.8,
        "base_quantity": {"min": 1, "max": 3},
        "emoji": "🍄",
    },
    "flint": {
        "name": "Flint",
        "description": "Sparks when struck against steel.",
        "tier": 2,
        "base_quantity": {"min": 1, "max": 2},
        "emoji": "🔥",
    },
    "iron_ore": {
        "name": {"en": "Iron Ore", "vi": "Quặng sắt"},
        "description": "Rust-streaked rock, heavy for its size.",
        "tier": 3,
        "base_quantity": {"min": 1, "max": 2},
        "emoji": "⛏️",
    },
    "cactus_water": {
        "name": "Cactus Water",
        "description": "Cloudy water squeezed from a cactus.",
        "tier": 2,
        "base_quantity": {"min": 1, "max": 1},
        "emoji": "💧",
    },
    "sand_glass": {
        "name": "Sand Glass",
        "description": "Glass fused by lightning.",
        "tier": 4,
        "base_quantity": {"min": 1, "max": 1},
        "emoji": "🔮",
    },
    "reed": {
        "name": "Reed",
        "description": "A hollow swamp reed.",
        "tier": 1,
        "base_quantity": {"min": 2, "max": 6},
        "emoji": "🌾",
    },
    "bog_iron": {
        "name": "Bog Iron",
        "description": "Iron nodules dredged from the mire.",
        "tier": 3,
        "base_quantity": {"min": 1, "max": 2},
        "emoji": "🟤",
    },
    "glowing_crystal": {
        "name": {"en": "Glowing Crystal", "vi": "Pha lê phát sáng"},
        "description": "Faintly warm to the touch.",
        "tier": 4,
        "base_quantity": {"min": 1, "max": 1},
        "emoji": "💎",
    },
    "seashell": {
        "name": "Seashell",
        "description": "A spiral shell, bleached white.",
        "tier": 1,
        "base_quantity": {"min": 1, "max": 3},
        "emoji": "🐚",
    },
    "driftwood": {
        "name": "Driftwood",
        "description": "Smooth, salt-worn wood.",
        "tier": 1,
        "base_quantity": {"min": 1, "max": 2},
        "emoji": "🪵",
    },
    "rusty_sword": {
        "name": "Rusty Sword",
        "description": "Still sharper than a stick.",
        "tier": 2,
        "base_quantity": {"min": 1, "max": 1},
        "emoji": "🗡️",
    },
    "gold_coin": {
        "name": "Gold Coin",
        "description": "Stamped with a forgotten king.",
        "tier": 3,
        "base_quantity": {"min": 1, "max": 5},
        "emoji": "🪙",
    },
    "ancient_relic": {
        "name": "Ancient Relic",
        "description": "It hums when nobody is looking at it.",
        "tier": 6,
        "base_quantity": {"min": 1, "max": 1},
        "emoji": "🏺",
    },
}

# ---------------------------------------------------------------------------
# Creatures
# ---------------------------------------------------------------------------

CREATURE_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "oak_sapling": {
        "id": "oak_sapling",
        "name": {"en": "Oak Sapling", "vi": "Cây sồi non"},
        "hp": 20,
        "emoji": "🌱",
        "plant_properties": {"growth_rate": 0.1},
        "natural_spawn": [
            {"biome": "forest", "chance": 0.6, "conditions": {"moisture": {"min": 40}}},
            {"biome": "grassland", "chance": 0.2},
        ],
    },
    "berry_bush": {
        "id": "berry_bush",
        "name": "Berry Bush",
        "hp": 15,
        "emoji": "🌳",
        "plant_properties": {"growth_rate": 0.2},
        "natural_spawn": [
            {"biome": "forest", "chance": 0.5},
            {"biome": "grassland", "chance": 0.4},
        ],
    },
    "saguaro": {
        "id": "saguaro",
        "name": "Saguaro",
        "hp": 40,
        "emoji": "🌵",
        "plant_properties": {"growth_rate": 0.02},
        "natural_spawn": [{"biome": "desert", "chance": 0.5}],
    },
    "cattail": {
        "id": "cattail",
        "name": "Cattail",
        "hp": 8,
        "emoji": "🌾",
        "plant_properties": {"growth_rate": 0.3},
        "natural_spawn": [{"biome": "swamp", "chance": 0.7, "conditions": {"moisture": {"min": 70}}}],
    },
    "cave_moss": {
        "id": "cave_moss",
        "name": "Cave Moss",
        "hp": 5,
        "emoji": "🟢",
        "plant_properties": {"growth_rate": 0.05},
        "natural_spawn": [{"biome": "cave", "chance": 0.5}],
    },
    "rabbit": {
        "id": "rabbit",
        "name": {"en": "Rabbit", "vi": "Thỏ"},
        "hp": 10,
        "damage": 1,
        "behavior": "passive",
        "size": "small",
        "emoji": "🐇",
        "diet": ["plants"],
        "natural_spawn": [
            {"biome": "grassland", "chance": 0.5},
            {"biome": "forest", "chance": 0.3},
        ],
    },
    "boar": {
        "id": "boar",
        "name": "Boar",
        "hp": 60,
        "damage": 8,
        "behavior": "territorial",
        "emoji": "🐗",
        "diet": ["plants", "meat"],
        "natural_spawn": [{"biome": "forest", "chance": 0.3, "conditions": {"danger_level": {"min": 30}}}],
    },
    "scorpion": {
        "id": "scorpion",
        "name": "Scorpion",
        "hp": 25,
        "damage": 12,
        "size": "small",
        "emoji": "🦂",
        "sense_effect": True,
        "sense_radius": 2,
        "natural_spawn": [{"biome": "desert", "chance": 0.4}],
    },
    "crab": {
        "id": "crab",
        "name": "Crab",
        "hp": 15,
        "damage": 3,
        "behavior": "defensive",
        "size": "small",
        "emoji": "🦀",
        "natural_spawn": [{"biome": "beach", "chance": 0.6}],
    },
}

# ---------------------------------------------------------------------------
# Terrain templates
# ---------------------------------------------------------------------------

TERRAIN_TEMPLATES: Dict[str, Dict[str, Any]] = {
    "forest": {
        "descriptions": [
            "A [adjective] forest stretches around you, with [feature] between the trees.",
            "You walk beneath a [adjective] canopy. Nearby you notice [feature].",
        ],
        "adjectives": ["dense", "quiet", "ancient", "shadowy"],
        "features": ["a fallen log", "a mossy boulder", "a trickling stream", "a ring of mushrooms"],
        "items": [
            {"name": "stick", "conditions": {"vegetation_density": {"min": 40}, "chance": 0.8}},
            {"name": "Healing Herb", "conditions": {"moisture": {"min": 40}, "chance": 0.5}},
            {"name": "wild_berries", "conditions": {"chance": 0.6}},
            {"name": "mushroom", "conditions": {"moisture": {"min": 50}, "chance": 0.5}},
            {"name": "ancient_relic", "conditions": {"magic_affinity": {"min": 50}, "chance": 0.1}},
        ],
        "npcs": [
            {
                "data": {
                    "name": "Hermit",
                    "description": "A bearded recluse who knows the old paths.",
                    "dialogue_seed": "wary but kind",
                },
                "conditions": {"human_presence": {"min": 5}, "chance": 0.3},
            },
        ],
        "enemies": [
            {
                "data": {
                    "type": "Wolf",
                    "emoji": "🐺",
                    "hp": 40,
                    "damage": 8,
                    "behavior": "aggressive",
                    "size": "medium",
                    "diet": ["meat"],
                    "max_satiation": 80,
                    "sense_effect": True,
                    "sense_radius": 4,
                },
                "conditions": {"predator_presence": {"min": 40}, "chance": 0.5},
            },
        ],
        "structures": [
            {
                "data": {"name": "Abandoned Hut", "description": "A sagging hut of logs and moss.", "emoji": "🛖"},
                "loot": [
                    {"name": "stick", "chance": 0.6, "quantity": {"min": 1, "max": 3}},
                    {"name": "rusty_sword", "chance": 0.1, "quantity": {"min": 1, "max": 1}},
                ],
                "conditions": {"human_presence": {"max": 40}, "chance": 0.05},
            },
        ],
    },
    "grassland": {
        "descriptions": ["An open, [adjective] plain. In the distance you see [feature]."],
        "adjectives": ["windswept", "sunny", "rolling"],
        "features": ["a lone tree", "a herd of grazing deer", "an old stone wall"],
        "items": [
            {"name": "stone", "conditions": {"chance": 0.5}},
            {"name": "flint", "conditions": {"soil_type": ["sandy", "rocky"], "chance": 0.3}},
            {"name": "wild_berries", "conditions": {"vegetation_density": {"min": 30}, "chance": 0.4}},
        ],
        "npcs": [
            {
                "data": {"name": "Shepherd", "description": "Counts sheep, loses count.", "dialogue_seed": "chatty"},
                "conditions": {"human_presence": {"min": 30}, "chance": 0.5},
            },
        ],
        "enemies": [
            {
                "data": {"type": "Bandit", "emoji": "🥷", "hp": 50, "damage": 9, "diet": ["meat", "bread"]},
                "conditions": {"human_presence": {"min": 40}, "danger_level": {"min": 20}, "chance": 0.3},
            },
        ],
        "structures": [
            {
                "data": {"name": "Roadside Shrine", "description": "Candles long since burned out.", "emoji": "⛩️"},
                "loot": [{"name": "Gold Coin", "chance": 0.2, "quantity": {"min": 1, "max": 3}}],
                "conditions": {"human_presence": {"min": 20}, "chance": 0.05},
            },
        ],
    },
    "desert": {
        "descriptions": ["[adjective] dunes stretch to the horizon, broken only by [feature]."],
        "adjectives": ["scorching", "endless", "shimmering"],
        "features": ["a bleached skeleton", "a rocky outcrop", "a mirage of water"],
        "items": [
            {"name": "cactus_water", "conditions": {"chance": 0.4}},
            {"name": "sand_glass", "conditions": {"magic_affinity": {"min": 20}, "chance": 0.2}},
            {"name": "stone", "conditions": {"chance": 0.3}},
        ],
        "npcs": [],
        "enemies": [
            {
                "data": {"type": "Sand Wraith", "emoji": "👻", "hp": 70, "damage": 14, "behavior": "ambush"},
                "conditions": {"danger_level": {"min": 60}, "chance": 0.3},
            },
        ],
        "structures": [
            {
                "data": {"name": "Buried Ruin", "description": "The top of an arch pokes out of the sand."},
                "loot": [
                    {"name": "gold_coin", "chance": 0.3, "quantity": {"min": 1, "max": 4}},
                    {"name": "ancient_relic", "chance": 0.02, "quantity": {"min": 1, "max": 1}},
                ],
                "conditions": {"chance": 0.04},
            },
        ],
    },
    "swamp": {
        "descriptions": ["The ground squelches underfoot in this [adjective] bog. You spot [feature]."],
        "adjectives": ["murky", "foul-smelling", "misty"],
        "features": ["bubbles rising from the mud", "a half-sunk boat", "a tangle of roots"],
        "items": [
            {"name": "reed", "conditions": {"moisture": {"min": 60}, "chance": 0.7}},
            {"name": "bog_iron", "conditions": {"soil_type": ["clay"], "chance": 0.2}},
            {"name": "Healing Herb", "conditions": {"chance": 0.3}},
        ],
        "npcs": [
            {
                "data": {"name": "Swamp Witch", "description": "Stirs a pot that stirs back.", "dialogue_seed": "cryptic"},
                "conditions": {"magic_affinity": {"min": 50}, "chance": 0.2},
            },
        ],
        "enemies": [
            {
                "data": {"type": "Bog Lurker", "emoji": "🐊", "hp": 80, "damage": 12, "size": "large"},
                "conditions": {"danger_level": {"min": 70}, "chance": 0.4},
            },
        ],
        "structures": [],
    },
    "mountain": {
        "descriptions": ["A [adjective] slope climbs above you. Ahead lies [feature]."],
        "adjectives": ["steep", "craggy", "snow-dusted"],
        "features": ["a narrow ledge", "an eagle's nest", "a mine entrance"],
        "items": [
            {"name": "Iron Ore", "conditions": {"elevation": {"min": 60}, "chance": 0.5}},
            {"name": "stone", "conditions": {"chance": 0.7}},
            {"name": "flint", "conditions": {"chance": 0.3}},
        ],
        "npcs": [
            {
                "data": {"name": "Prospector", "description": "Taps every rock twice.", "dialogue_seed": "greedy"},
                "conditions": {"human_presence": {"min": 15}, "chance": 0.3},
            },
        ],
        "enemies": [
            {
                "data": {"type": "Rock Troll", "emoji": "🧌", "hp": 150, "damage": 20, "size": "large"},
                "conditions": {"danger_level": {"min": 70}, "chance": 0.2},
            },
        ],
        "creatures": [
            {
                "data": {"type": "Mountain Goat", "emoji": "🐐", "hp": 30, "damage": 4, "behavior": "passive"},
                "conditions": {"chance": 0.4},
            },
        ],
        "structures": [
            {
                "data": {"name": "Collapsed Mine", "description": "Timbers splintered, tracks rusted."},
                "loot": [{"name": "iron_ore", "chance": 0.5, "quantity": {"min": 1, "max": 3}}],
                "conditions": {"elevation": {"min": 50}, "chance": 0.05},
            },
        ],
    },
    "cave": {
        "descriptions": ["A [adjective] cavern. Water drips near [feature]."],
        "adjectives": ["dark", "echoing", "damp"],
        "features": ["a pool of still water", "a cluster of stalagmites", "old claw marks"],
        "items": [
            {"name": "glowing_crystal", "conditions": {"magic_affinity": {"min": 60}, "chance": 0.3}},
            {"name": "stone", "conditions": {"chance": 0.6}},
            {"name": "mushroom", "conditions": {"chance": 0.4}},
        ],
        "npcs": [],
        "enemies": [
            {
                "data": {"type": "Giant Bat", "emoji": "🦇", "hp": 30, "damage": 6, "size": "small"},
                "conditions": {"chance": 0.5},
            },
        ],
        "structures": [
            {
                "data": {"name": "Forgotten Altar", "description": "Carved with spirals that hurt to follow."},
                "loot": [
                    {"name": "Glowing Crystal", "chance": 0.3, "quantity": {"min": 1, "max": 2}},
                    {"name": "ancient_relic", "chance": 0.05, "quantity": {"min": 1, "max": 1}},
                ],
                "conditions": {"magic_affinity": {"min": 60}, "chance": 0.05},
            },
        ],
    },
    "beach": {
        "descriptions": ["Waves roll onto a [adjective] shore. The tide has left [feature]."],
        "adjectives": ["sandy", "pebbly", "quiet"],
        "features": ["a tangle of seaweed", "a broken crate", "footprints leading inland"],
        "items": [
            {"name": "seashell", "conditions": {"chance": 0.7}},
            {"name": "driftwood", "conditions": {"chance": 0.5}},
        ],
        "npcs": [
            {
                "data": {"name": "Fisher", "description": "Mending a net with patient hands.", "dialogue_seed": "calm"},
                "conditions": {"human_presence": {"min": 20}, "chance": 0.4},
            },
        ],
        "enemies": [],
        "structures": [
            {
                "data": {"name": "Shipwreck", "description": "A hull split open on the rocks."},
                "loot": [
                    {"name": "gold_coin", "chance": 0.3, "quantity": {"min": 1, "max": 6}},
                    {"name": "rusty_sword", "chance": 0.2, "quantity": {"min": 1, "max": 1}},
                ],
                "conditions": {"chance": 0.03},
            },
        ],
    },
}
