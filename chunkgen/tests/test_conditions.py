"""Tests for spawn condition evaluation."""

import unittest

from chunkgen.base import EnvironmentalSnapshot
from chunkgen.conditions import eligible


def _snapshot(**overrides):
    values = dict(terrain="forest", moisture=60, danger_level=40, soil_type="loamy")
    values.update(overrides)
    return EnvironmentalSnapshot(**values)


class TestEligible(unittest.TestCase):
    def test_empty_conditions_pass(self):
        self.assertTrue(eligible(None, _snapshot()))
        self.assertTrue(eligible({}, _snapshot()))

    def test_chance_is_ignored(self):
        self.assertTrue(eligible({"chance": 0.0}, _snapshot()))

    def test_min_and_max(self):
        snap = _snapshot()
        self.assertTrue(eligible({"moisture": {"min": 60}}, snap))
        self.assertTrue(eligible({"moisture": {"max": 60}}, snap))
        self.assertFalse(eligible({"moisture": {"min": 61}}, snap))
        self.assertFalse(eligible({"moisture": {"max": 59}}, snap))
        self.assertTrue(eligible({"moisture": {"min": 30, "max": 80}, "danger_level": {"max": 50}}, snap))
        self.assertFalse(eligible({"moisture": {"min": 30}, "danger_level": {"min": 50}}, snap))

    def test_camel_case_keys(self):
        snap = _snapshot(danger_level=80)
        self.assertFalse(eligible({"dangerLevel": {"max": 70}}, snap))
        self.assertTrue(eligible({"dangerLevel": {"min": 70}}, snap))

    def test_soil_membership(self):
        snap = _snapshot(soil_type="clay")
        self.assertTrue(eligible({"soilType": ["clay", "loamy"]}, snap))
        self.assertFalse(eligible({"soilType": ["sandy"]}, snap))
        self.assertFalse(eligible({"soil_type": ["rocky"]}, snap))
        self.assertTrue(eligible({"soil_type": "clay"}, snap))

    def test_malformed_entries_are_skipped(self):
        snap = _snapshot()
        with self.assertLogs("chunkgen.conditions", level="WARNING"):
            self.assertTrue(eligible({"terrain": {"min": 1}}, snap))
        with self.assertLogs("chunkgen.conditions", level="WARNING"):
            self.assertTrue(eligible({"no_such_reading": {"min": 1}}, snap))
        with self.assertLogs("chunkgen.conditions", level="WARNING"):
            self.assertTrue(eligible({"moisture": 12}, snap))
        with self.assertLogs("chunkgen.conditions", level="WARNING"):
            self.assertTrue(eligible({"moisture": {"min": "lots"}}, snap))
        with self.assertLogs("chunkgen.conditions", level="WARNING"):
            self.assertTrue(eligible({"soilType": 7}, snap))

    def test_malformed_entry_does_not_hide_failing_one(self):
        snap = _snapshot()
        self.assertFalse(eligible({"terrain": {"min": 1}, "moisture": {"min": 90}}, snap))

    def test_snapshot_from_authored_data(self):
        snap = EnvironmentalSnapshot.from_dict(
            {"terrain": "swamp", "dangerLevel": 85, "soilType": "clay", "moisture": 95, "unrelated": 1}
        )
        self.assertEqual(snap.danger_level, 85)
        self.assertEqual(snap.soil_type, "clay")
        self.assertEqual(snap.human_presence, 50)
        self.assertEqual(snap.value_of("dangerLevel"), 85)
        self.assertIsNone(snap.value_of("unrelated"))
        self.assertFalse(eligible({"dangerLevel": {"max": 80}}, snap))

    def test_deterministic(self):
        snap = _snapshot()
        conditions = {"moisture": {"min": 50}, "soilType": ["loamy"]}
        results = {eligible(conditions, snap) for _ in range(20)}
        self.assertEqual(results, {True})
