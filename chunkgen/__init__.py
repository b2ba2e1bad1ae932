"""Procedural chunk content generation for a tile-based exploration world.

Decides what exists in a chunk (description, items, NPCs, enemy,
structures, plants, actions) from its environmental readings, and grows the
world region by region as the player roams outward.

Usage:
    from chunkgen import GenerationContext, WorldProfile, generate_chunks_in_radius
    context = GenerationContext.default(seed=42)
    world, regions, counter = generate_chunks_in_radius({}, {}, 0, (0, 0), 2, WorldProfile(), context)
"""

from __future__ import annotations

from .assembler import generate_chunk_content
from .base import (
    Action,
    Chunk,
    ChunkContent,
    ChunkItem,
    Enemy,
    EnvironmentalSnapshot,
    ExpansionResult,
    GenerationContext,
    ItemDefinition,
    PlantInstance,
    Region,
    SpawnCandidate,
    WorldProfile,
    chunk_key,
)
from .conditions import eligible
from .config import Tuning, load_tuning
from .expansion import ensure_chunk_exists, generate_chunks_in_radius
from .region import generate_region
from .selector import select_entities

__all__ = [
    "Action",
    "Chunk",
    "ChunkContent",
    "ChunkItem",
    "Enemy",
    "EnvironmentalSnapshot",
    "ExpansionResult",
    "GenerationContext",
    "ItemDefinition",
    "PlantInstance",
    "Region",
    "SpawnCandidate",
    "Tuning",
    "WorldProfile",
    "chunk_key",
    "eligible",
    "ensure_chunk_exists",
    "generate_chunk_content",
    "generate_chunks_in_radius",
    "generate_region",
    "load_tuning",
    "select_entities",
]
