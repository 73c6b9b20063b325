"""Unit tests for the random number tool."""

import unittest

from chemgraph.utils import random_numbers
from chemgraph.utils.random_numbers import RandomNumbersTool


class TestRandomNumbersTool(unittest.TestCase):
    """Test suite for RandomNumbersTool class."""

    def test_inclusive_range(self):
        tool = RandomNumbersTool(0)
        drawn = {tool.random_int(2, 4) for _ in range(200)}
        self.assertEqual(drawn, {2, 3, 4})

    def test_single_value_range(self):
        self.assertEqual(RandomNumbersTool().random_int(5, 5), 5)
        self.assertEqual(random_numbers.random_int(0, 0), 0)

    def test_empty_range(self):
        with self.assertRaises(ValueError):
            RandomNumbersTool().random_int(3, 2)

    def test_reseeding_repeats_sequence(self):
        tool = RandomNumbersTool(8)
        first = [tool.random_int(0, 100) for _ in range(10)]
        tool.set_seed(8)
        second = [tool.random_int(0, 100) for _ in range(10)]
        self.assertEqual(first, second)
        self.assertEqual(tool.get_seed(), 8)

    def test_default_tool_is_shared(self):
        tool = random_numbers.get_default_tool()
        self.assertIs(tool, random_numbers.get_default_tool())


if __name__ == "__main__":
    unittest.main()
