"""Tests for tuning configuration."""

import os
import tempfile
import unittest
from unittest.mock import patch


class TestLoadTuning(unittest.TestCase):
    def test_defaults(self):
        from chunkgen.config import Tuning, load_tuning

        tuning = load_tuning()
        self.assertEqual(tuning, Tuning())
        self.assertEqual(tuning.base_max_items, 1.4)
        self.assertEqual(tuning.base_find_chance, 0.035)
        self.assertEqual(tuning.cost_scale, 0.6)
        self.assertEqual(tuning.max_plants_per_chunk, 18)

    @patch.dict("os.environ", {"CHUNKGEN_BASE_FIND_CHANCE": "0.05", "CHUNKGEN_MAX_PLANTS_PER_CHUNK": "6"})
    def test_environment_overrides(self):
        from chunkgen.config import load_tuning

        tuning = load_tuning()
        self.assertEqual(tuning.base_find_chance, 0.05)
        self.assertEqual(tuning.max_plants_per_chunk, 6)
        self.assertIsInstance(tuning.max_plants_per_chunk, int)

    @patch.dict("os.environ", {"CHUNKGEN_COST_SCALE": "cheap"})
    def test_unparsable_value_raises(self):
        from chunkgen.config import load_tuning

        with self.assertRaises(ValueError):
            load_tuning()

    @patch.dict("os.environ", {"CHUNKGEN_SOFTCAP_K": "1.5"})
    def test_out_of_range_value_raises(self):
        from chunkgen.config import load_tuning

        with self.assertRaises(ValueError):
            load_tuning()

    @patch.dict("os.environ", {}, clear=False)
    def test_env_file(self):
        from chunkgen.config import load_tuning

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, ".env")
            with open(path, "w") as f:
                f.write("CHUNKGEN_BORDER_WALL_CHANCE=0.5\n")
            tuning = load_tuning(path)
        self.assertEqual(tuning.border_wall_chance, 0.5)

    def test_missing_env_file_is_not_fatal(self):
        from chunkgen.config import Tuning, load_tuning

        with self.assertLogs("chunkgen.config", level="WARNING"):
            tuning = load_tuning("/nonexistent/chunkgen.env")
        self.assertEqual(tuning, Tuning())
