"""Tests for probabilistic entity selection."""

import random
import unittest

from chunkgen.base import EnvironmentalSnapshot, SpawnCandidate, WorldProfile
from chunkgen.helpers import resource_score
from chunkgen.resolver import build_item_registry
from chunkgen.rng import FixedSequence
from chunkgen.selector import select_entities, spawn_chance

REGISTRY = build_item_registry(
    {
        "stone": {"name": "Stone", "tier": 1},
        "iron_ore": {"name": {"en": "Iron Ore"}, "tier": 3},
    }
)


def _npc(name, chance=0.5, **conditions):
    return SpawnCandidate.from_template("npc", {"data": {"name": name}, "conditions": {"chance": chance, **conditions}})


class TestSpawnChance(unittest.TestCase):
    def test_tier_penalty(self):
        candidate = SpawnCandidate(kind="item", name="iron_ore", conditions={"chance": 0.5})
        # score 0.5 -> richness factor 1.0
        self.assertAlmostEqual(spawn_chance(candidate, 0.5, REGISTRY, WorldProfile()), 0.5 * 0.81)

    def test_unregistered_identity_has_no_penalty(self):
        candidate = _npc("Hermit", chance=0.5)
        self.assertAlmostEqual(spawn_chance(candidate, 0.5, REGISTRY, WorldProfile()), 0.5)

    def test_chance_is_bounded(self):
        rng = random.Random(21)
        for _ in range(500):
            candidate = _npc("x", chance=rng.uniform(0, 20))
            profile = WorldProfile(spawn_multiplier=rng.uniform(0, 50), resource_density=rng.uniform(0, 10))
            chance = spawn_chance(candidate, rng.random(), REGISTRY, profile)
            self.assertGreaterEqual(chance, 0.0)
            self.assertLessEqual(chance, 0.95)


class TestSelectEntities(unittest.TestCase):
    def setUp(self):
        self.snapshot = EnvironmentalSnapshot(terrain="forest", human_presence=20)
        self.profile = WorldProfile()

    def _select(self, candidates, capacity, rng):
        return select_entities(candidates, capacity, self.snapshot, REGISTRY, self.profile, rng)

    def test_capacity_respected(self):
        pool = [_npc(f"npc{i}") for i in range(10)]
        self.assertEqual(len(self._select(pool, 2, FixedSequence([0.0]))), 2)
        self.assertEqual(len(self._select(pool, 1, FixedSequence([0.0]))), 1)

    def test_zero_capacity(self):
        rng = FixedSequence([0.0])
        self.assertEqual(self._select([_npc("a")], 0, rng), [])
        self.assertEqual(rng.calls, 0)

    def test_failed_rolls_select_nothing(self):
        pool = [_npc(f"npc{i}") for i in range(5)]
        self.assertEqual(self._select(pool, 3, FixedSequence([0.99])), [])

    def test_ineligible_candidates_filtered(self):
        pool = [_npc("townsfolk", human_presence={"min": 50}), _npc("hermit", human_presence={"max": 30})]
        chosen = self._select(pool, 5, FixedSequence([0.0]))
        self.assertEqual([c.identity for c in chosen], ["hermit"])

    def test_empty_and_conditionless_entries_skipped(self):
        no_conditions = SpawnCandidate.from_template("npc", {"data": {"name": "ghost"}})
        self.assertIsNone(no_conditions.conditions)
        with self.assertLogs("chunkgen.selector", level="ERROR"):
            chosen = self._select([None, no_conditions, _npc("real")], 5, FixedSequence([0.0]))
        self.assertEqual([c.identity for c in chosen], ["real"])

    def test_identityless_candidates_skipped(self):
        nameless = SpawnCandidate(kind="enemy", conditions={"chance": 1.0}, data={"hp": 10})
        with self.assertLogs("chunkgen.selector", level="ERROR"):
            chosen = self._select([nameless], 1, FixedSequence([0.0]))
        self.assertEqual(chosen, [])

    def test_zero_chance_never_selected(self):
        pool = [_npc("never", chance=0.0)]
        self.assertEqual(self._select(pool, 1, FixedSequence([0.0])), [])

    def test_statistical_rate(self):
        """A lone candidate is picked at its computed chance."""
        rng = random.Random(99)
        candidate = _npc("Hermit", chance=0.4)
        trials = 4000
        hits = sum(len(self._select([candidate], 1, rng)) for _ in range(trials))
        expected = spawn_chance(candidate, resource_score(self.snapshot), REGISTRY, self.profile)
        self.assertGreater(hits, 0)
        self.assertAlmostEqual(hits / trials, expected, delta=0.05)
