"""Shared fixtures for the maze generation tests."""

from collections import deque

import pytest

from divmaze.utils.rng import SeededRNG


class ScriptedRNG(SeededRNG):
    """RNG that replays queued integers and colors before falling back to the low bound."""

    def __init__(self, integers=(), colors=()):
        super().__init__(0)
        self.integers = deque(integers)
        self.colors = deque(colors)

    def randint(self, a, b):
        if self.integers:
            return self.integers.popleft()
        return a

    def choice(self, seq):
        return seq[0]

    def random_color(self):
        if self.colors:
            return self.colors.popleft()
        return "#000000"


class RecordingSink:
    """Paint sink that remembers every call."""

    def __init__(self):
        self.cleared = 0
        self.painted = []

    def clear_all(self):
        self.cleared += 1
        self.painted = []

    def paint(self, cell, material, tag=None):
        self.painted.append((cell, material, tag))


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRNG instances."""
    return ScriptedRNG


@pytest.fixture
def seeded_rng():
    return SeededRNG(12345)


@pytest.fixture
def sink():
    return RecordingSink()
