"""Tests for lazy world expansion and terrain adjacency."""

import random
import unittest
from unittest.mock import Mock

from chunkgen.base import EnvironmentalSnapshot, ExpansionResult, GenerationContext, WorldProfile, chunk_key
from chunkgen.biome import BIOMES, valid_adjacent_terrains
from chunkgen.expansion import ensure_chunk_exists, generate_chunks_in_radius
from chunkgen.region import wall_chunk


def _materialize_one(pos, terrain, world, regions, counter, profile, context, season):
    """Region generator stand-in that creates just the requested cell."""
    world[chunk_key(*pos)] = wall_chunk(*pos)
    return ExpansionResult(world, regions, counter + 1)


def _chunk(x, y, terrain):
    chunk = wall_chunk(x, y)
    chunk.snapshot = EnvironmentalSnapshot(terrain=terrain)
    return chunk


class TestValidAdjacentTerrains(unittest.TestCase):
    def test_no_neighbours_allows_everything_but_wall(self):
        terrains = valid_adjacent_terrains((0, 0), {}, BIOMES)
        self.assertNotIn("wall", terrains)
        self.assertEqual(set(terrains), set(BIOMES) - {"wall"})

    def test_single_neighbour(self):
        world = {chunk_key(1, 0): _chunk(1, 0, "volcanic")}
        self.assertEqual(valid_adjacent_terrains((0, 0), world, BIOMES), ["desert", "mountain"])

    def test_intersection_of_neighbours(self):
        world = {
            chunk_key(0, 1): _chunk(0, 1, "forest"),
            chunk_key(0, -1): _chunk(0, -1, "grassland"),
        }
        terrains = valid_adjacent_terrains((0, 0), world, BIOMES)
        self.assertEqual(set(terrains), {"swamp", "jungle"})

    def test_wall_neighbours_do_not_restrict(self):
        world = {chunk_key(-1, 0): wall_chunk(-1, 0), chunk_key(1, 0): _chunk(1, 0, "cave")}
        terrains = valid_adjacent_terrains((0, 0), world, BIOMES)
        self.assertEqual(set(terrains), {"mountain", "mushroom_forest", "underwater"})

    def test_empty_intersection_falls_back(self):
        world = {
            chunk_key(1, 0): _chunk(1, 0, "space_station"),
            chunk_key(-1, 0): _chunk(-1, 0, "forest"),
        }
        self.assertEqual(valid_adjacent_terrains((0, 0), world, BIOMES), ["grassland", "forest"])

    def test_diagonals_ignored(self):
        world = {chunk_key(1, 1): _chunk(1, 1, "volcanic")}
        self.assertEqual(len(valid_adjacent_terrains((0, 0), world, BIOMES)), len(BIOMES) - 1)


class TestEnsureChunkExists(unittest.TestCase):
    def setUp(self):
        self.context = GenerationContext.default(seed=4)
        self.profile = WorldProfile()

    def test_existing_chunk_is_untouched(self):
        world = {chunk_key(0, 0): wall_chunk(0, 0)}
        regions = {}
        generator = Mock(side_effect=_materialize_one)
        result = ensure_chunk_exists((0, 0), world, regions, 7, self.profile, self.context, region_generator=generator)
        self.assertIs(result.world, world)
        self.assertIs(result.regions, regions)
        self.assertEqual(result.region_counter, 7)
        generator.assert_not_called()

    def test_missing_chunk_delegates_to_generator(self):
        world = {chunk_key(1, 0): _chunk(1, 0, "volcanic")}
        generator = Mock(side_effect=_materialize_one)
        result = ensure_chunk_exists((0, 0), world, {}, 3, self.profile, self.context, "winter", region_generator=generator)

        generator.assert_called_once()
        args = generator.call_args[0]
        self.assertEqual(args[0], (0, 0))
        self.assertIn(args[1], ("desert", "mountain"))
        self.assertIsNot(args[2], world)
        self.assertEqual(args[7], "winter")

        self.assertIn(chunk_key(0, 0), result.world)
        self.assertNotIn(chunk_key(0, 0), world)
        self.assertEqual(result.region_counter, 4)

    def test_idempotent(self):
        first = ensure_chunk_exists((2, 2), {}, {}, 0, self.profile, self.context)
        second = ensure_chunk_exists((2, 2), first.world, first.regions, first.region_counter, self.profile, self.context)
        self.assertEqual(second, first)
        self.assertIs(second.world, first.world)

    def test_terrain_choice_follows_spread_weight(self):
        context = GenerationContext.default(rng=random.Random(12))
        generator = Mock(side_effect=_materialize_one)
        counts = {}
        for _ in range(400):
            ensure_chunk_exists((0, 0), {}, {}, 0, self.profile, context, region_generator=generator)
            terrain = generator.call_args[0][1]
            counts[terrain] = counts.get(terrain, 0) + 1
        self.assertNotIn("wall", counts)
        # grassland (0.8) should come up far more often than cave (0.05)
        self.assertGreater(counts.get("grassland", 0), counts.get("cave", 0))

    def test_generator_failure_propagates(self):
        generator = Mock(side_effect=RuntimeError("region store unavailable"))
        world = {}
        with self.assertRaises(RuntimeError):
            ensure_chunk_exists((0, 0), world, {}, 0, self.profile, self.context, region_generator=generator)
        self.assertEqual(world, {})


class TestGenerateChunksInRadius(unittest.TestCase):
    def setUp(self):
        self.context = GenerationContext.default(seed=6)
        self.profile = WorldProfile()

    def test_sweep_order_and_state_threading(self):
        generator = Mock(side_effect=_materialize_one)
        result = generate_chunks_in_radius({}, {}, 0, (0, 0), 1, self.profile, self.context, region_generator=generator)
        positions = [c[0][0] for c in generator.call_args_list]
        expected = [(x, y) for x in (-1, 0, 1) for y in (-1, 0, 1)]
        self.assertEqual(positions, expected)
        self.assertEqual(result.region_counter, 9)
        self.assertEqual(len(result.world), 9)

    def test_existing_chunks_skipped(self):
        generator = Mock(side_effect=_materialize_one)
        world = {chunk_key(0, 0): wall_chunk(0, 0)}
        result = generate_chunks_in_radius(world, {}, 0, (0, 0), 1, self.profile, self.context, region_generator=generator)
        self.assertEqual(generator.call_count, 8)
        self.assertIs(result.world[chunk_key(0, 0)], world[chunk_key(0, 0)])
        self.assertEqual(len(world), 1)

    def test_negative_radius_is_a_no_op(self):
        generator = Mock(side_effect=_materialize_one)
        result = generate_chunks_in_radius({}, {}, 0, (0, 0), -1, self.profile, self.context, region_generator=generator)
        generator.assert_not_called()
        self.assertEqual(result.world, {})

    def test_default_generator_fills_square(self):
        result = generate_chunks_in_radius({}, {}, 0, (5, -3), 2, self.profile, self.context)
        for x in range(3, 8):
            for y in range(-5, 0):
                self.assertIn(chunk_key(x, y), result.world)
        self.assertGreaterEqual(result.region_counter, 1)
        for region_id, region in result.regions.items():
            for cx, cy in region.cells:
                chunk = result.world[chunk_key(cx, cy)]
                self.assertEqual(chunk.region_id, region_id)
                self.assertEqual(chunk.terrain, region.terrain)

        again = generate_chunks_in_radius(
            result.world, result.regions, result.region_counter, (5, -3), 2, self.profile, self.context
        )
        self.assertEqual(again.region_counter, result.region_counter)
        self.assertEqual(set(again.world), set(result.world))
