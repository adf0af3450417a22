from typing import Iterable, Tuple

import pytest

from gridsweep.engine import Grid


class LayoutRandom:
    """Stand-in random source whose shuffle moves the given coordinates to the front."""

    def __init__(self, hazards: Iterable[Tuple[int, int]]):
        self.hazards = set(hazards)

    def shuffle(self, x):
        x.sort(key=lambda p: p not in self.hazards)


@pytest.fixture()
def make_grid():
    """Build a grid with hazards at exactly the given (x, y) positions."""
    def _make(width: int, height: int, hazards) -> Grid:
        hazards = list(hazards)
        return Grid(width, height, len(hazards), rng=LayoutRandom(hazards))
    return _make
