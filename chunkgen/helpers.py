"""Shared numeric and naming helpers for the generation pipeline."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .base import EnvironmentalSnapshot


def softcap(m: float, k: float = 0.4) -> float:
    """Diminishing-returns transform for multipliers above 1.

    softcap(1.0) == 1.0, softcap(2.0) ~= 1.43, softcap(4.0) ~= 1.82.
    Values at or below 1 pass through unchanged.
    """
    if m <= 1:
        return m
    return m / (1 + (m - 1) * k)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def clamp01(value: float) -> float:
    """Normalize a 0-100 reading into [0, 1]."""
    return clamp(value / 100.0, 0.0, 1.0)


def resource_score(snapshot: EnvironmentalSnapshot) -> float:
    """Composite 0..1 richness of a chunk.

    Vegetation and moisture raise it; human, danger and predator presence
    lower it.  Each term is normalized from its 0-100 scale and the five
    are averaged.
    """
    vegetation = clamp01(snapshot.vegetation_density)
    moisture = clamp01(snapshot.moisture)
    human = 1 - clamp01(snapshot.human_presence)
    danger = 1 - clamp01(snapshot.danger_level)
    predator = 1 - clamp01(snapshot.predator_presence)
    return (vegetation + moisture + human + danger + predator) / 5


def display_name(name: Any, language: str = "en") -> Optional[str]:
    """Resolve a plain or per-language name to a display string.

    Per-language names are mappings like ``{"en": "Stone", "vi": "Sỏi"}``;
    the requested language wins, then English, then any non-empty entry.
    """
    if name is None:
        return None
    if isinstance(name, str):
        return name or None
    if isinstance(name, Mapping):
        for key in (language, "en"):
            value = name.get(key)
            if value:
                return str(value)
        for value in name.values():
            if value:
                return str(value)
        return None
    return str(name)


def all_display_names(name: Any) -> List[str]:
    """Every spelling of a name across languages."""
    if name is None:
        return []
    if isinstance(name, str):
        return [name] if name else []
    if isinstance(name, Mapping):
        return [str(v) for v in name.values() if v]
    return [str(name)]
