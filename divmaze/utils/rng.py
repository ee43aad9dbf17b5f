"""Seeded random number generator for reproducible mazes."""

import colorsys
import random
from typing import Optional


class SeededRNG:
    """Seeded random number generator for reproducible results."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Generate a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def random_color(self) -> str:
        """Generate a '#rrggbb' tag with a random, fully saturated hue."""
        r, g, b = colorsys.hsv_to_rgb(self._rng.random(), 1.0, 1.0)
        return f"#{int(r * 255):02x}{int(g * 255):02x}{int(b * 255):02x}"


# Global instance used when no generator is injected
default_rng = SeededRNG()
