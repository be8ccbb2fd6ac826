import dataclasses
import unittest

from game import Direction, InvalidTileError, Tile, ALL_DIRECTIONS


class TestTile(unittest.TestCase):
    def test_given_no_value_when_constructing_then_tile_is_empty(self):
        self.assertTrue(Tile.new(None).is_empty)
        self.assertTrue(Tile.empty().is_empty)
        self.assertFalse(Tile.empty().is_occupied)
        self.assertEqual(Tile.new(), Tile.empty())

    def test_given_positive_value_when_constructing_then_tile_is_occupied(self):
        t = Tile.occupied(8)
        self.assertTrue(t.is_occupied)
        self.assertEqual(t.value, 8)
        self.assertEqual(t, Tile.new(8))
        self.assertNotEqual(t, Tile.new(4))
        self.assertNotEqual(t, Tile.empty())

    def test_given_invalid_values_when_constructing_then_rejected(self):
        for bad in (0, -2, 2.0, "2", True):
            with self.assertRaises(InvalidTileError):
                Tile.new(bad)
        with self.assertRaises(InvalidTileError):
            Tile.occupied(None)
        # errors are ValueErrors for callers that do not know the engine types
        with self.assertRaises(ValueError):
            Tile.new(-1)

    def test_given_tile_when_doubling_then_new_tile_and_input_untouched(self):
        t = Tile.occupied(16)
        self.assertEqual(t.doubled(), Tile.occupied(32))
        self.assertEqual(t.value, 16)
        with self.assertRaises(InvalidTileError):
            Tile.empty().doubled()

    def test_tiles_are_immutable(self):
        t = Tile.occupied(2)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            t.value = 4  # type: ignore[misc]


class TestDirection(unittest.TestCase):
    def test_offsets_and_indices(self):
        self.assertEqual((Direction.UP.dx, Direction.UP.dy), (0, -1))
        self.assertEqual((Direction.RIGHT.dx, Direction.RIGHT.dy), (1, 0))
        self.assertEqual((Direction.DOWN.dx, Direction.DOWN.dy), (0, 1))
        self.assertEqual((Direction.LEFT.dx, Direction.LEFT.dy), (-1, 0))
        self.assertEqual([d.index for d in ALL_DIRECTIONS], [0, 1, 2, 3])
        self.assertTrue(Direction.LEFT.is_horizontal)
        self.assertFalse(Direction.UP.is_horizontal)

    def test_opposite(self):
        self.assertIs(Direction.UP.opposite(), Direction.DOWN)
        self.assertIs(Direction.LEFT.opposite(), Direction.RIGHT)

    def test_given_various_inputs_when_parsing_then_expected_direction(self):
        self.assertIs(Direction.parse("left"), Direction.LEFT)
        self.assertIs(Direction.parse(" Up "), Direction.UP)
        self.assertIs(Direction.parse("a"), Direction.LEFT)
        self.assertIs(Direction.parse("s"), Direction.DOWN)
        self.assertIs(Direction.parse(1), Direction.RIGHT)
        self.assertIs(Direction.parse("2"), Direction.DOWN)
        self.assertIs(Direction.parse(Direction.UP), Direction.UP)

    def test_given_garbage_when_parsing_then_value_error(self):
        for bad in ("x", "", 4, -1, True, None):
            with self.assertRaises(ValueError):
                Direction.parse(bad)
        with self.assertRaises(ValueError):
            Direction.from_index(7)


if __name__ == '__main__':
    unittest.main(verbosity=2)
