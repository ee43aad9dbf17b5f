"""
Tests for the seeded random number generator.
"""

import re

from divmaze.utils.rng import SeededRNG


class TestSeededRNG:

    def test_same_seed_same_sequence(self):
        first = SeededRNG(42)
        second = SeededRNG(42)
        assert [first.randint(3, 20) for _ in range(10)] == [second.randint(3, 20) for _ in range(10)]

    def test_randint_is_inclusive(self):
        rng = SeededRNG(0)
        values = {rng.randint(3, 5) for _ in range(200)}
        assert values == {3, 4, 5}

    def test_random_color_format(self):
        rng = SeededRNG(8)
        for _ in range(20):
            assert re.fullmatch(r"#[0-9a-f]{6}", rng.random_color())

    def test_same_seed_same_colors(self):
        assert SeededRNG(9).random_color() == SeededRNG(9).random_color()
