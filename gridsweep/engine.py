from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Tuple, Optional, Iterable

from .features import adjacency_counts, hazard_mask, revealed_mask, flagged_mask, state_codes, HIDDEN, FLAGGED, DETONATED

Coordinate = Tuple[int, int]

logger = logging.getLogger(__name__)

# At most 5/9 of the board may hold hazards
HAZARD_CAP_NUM = 5
HAZARD_CAP_DEN = 9


def max_hazards(width: int, height: int) -> int:
    return width * height * HAZARD_CAP_NUM // HAZARD_CAP_DEN


@dataclass
class Cell:
    is_hazard: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adj_hazards: int = 0


class Grid:
    """Rectangular hazard grid with reveal, flag and win checks.

    Hazards are placed once, at construction, by shuffling every coordinate
    and taking the first ``min(hazards, max_hazards(width, height))``.
    Pass ``seed`` or a ``random.Random`` as ``rng`` for a reproducible layout.
    """

    def __init__(self, width: int, height: int, hazards: int,
                 seed: Optional[int] = None, rng: Optional[random.Random] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        if hazards < 0:
            raise ValueError(f"hazard count must not be negative, got {hazards}")
        self.width = width
        self.height = height
        if rng is None:
            rng = random.Random(int(seed)) if seed is not None else random.Random()
        self.rng = rng
        self.grid: List[List[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]
        self.num_hazards = min(hazards, max_hazards(width, height))
        self._place_hazards()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        coords = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    coords.append((nx, ny))
        return coords

    def cell(self, x: int, y: int) -> Cell:
        return self.grid[y][x]

    def _place_hazards(self):
        positions = [(x, y) for y in range(self.height) for x in range(self.width)]
        self.rng.shuffle(positions)
        for (x, y) in positions[:self.num_hazards]:
            self.grid[y][x].is_hazard = True
        counts = adjacency_counts(hazard_mask(self))
        for y in range(self.height):
            for x in range(self.width):
                # hazard cells keep the default
                if not self.grid[y][x].is_hazard:
                    self.grid[y][x].adj_hazards = int(counts[y, x])
        logger.debug(f"Placed {self.num_hazards} hazards on {self.width}x{self.height} grid")

    def reveal(self, x: int, y: int) -> bool:
        """Uncover (x, y) and return True if it was a hazard.

        A safe cell with no adjacent hazards also uncovers its neighbours,
        spreading through the whole zero region. Flags do not block a reveal.
        """
        if not self.in_bounds(x, y) or self.grid[y][x].is_revealed:
            return False
        c = self.grid[y][x]
        c.is_revealed = True
        c.is_flagged = False
        if c.is_hazard:
            logger.debug(f"Hazard revealed at ({x}, {y})")
            return True
        opened = 1
        stack = [(x, y)] if c.adj_hazards == 0 else []
        while stack:
            cx, cy = stack.pop()
            for (nx, ny) in self.neighbors(cx, cy):
                n = self.grid[ny][nx]
                if n.is_revealed:
                    continue
                # zero cells never border a hazard
                n.is_revealed = True
                n.is_flagged = False
                opened += 1
                if n.adj_hazards == 0:
                    stack.append((nx, ny))
        logger.debug(f"Revealed {opened} cell(s) from ({x}, {y})")
        return False

    def flag(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            return
        c = self.grid[y][x]
        if c.is_revealed:
            return
        c.is_flagged = not c.is_flagged
        logger.debug(f"Flag at ({x}, {y}) set to {c.is_flagged}")

    def check_win(self) -> bool:
        for row in self.grid:
            for c in row:
                if not c.is_hazard and not c.is_revealed:
                    return False
        return True

    @property
    def revealed_count(self) -> int:
        return int(revealed_mask(self).sum())

    @property
    def flag_count(self) -> int:
        return int(flagged_mask(self).sum())

    def hazard_positions(self) -> Iterable[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                if self.grid[y][x].is_hazard:
                    yield (x, y)

    def render_ascii(self, show_hazards: bool = False) -> str:
        codes = state_codes(self)
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                code = int(codes[y, x])
                if code == DETONATED:
                    row.append('*')
                elif code == FLAGGED:
                    row.append('F')
                elif code == HIDDEN:
                    row.append('M' if show_hazards and self.grid[y][x].is_hazard else '.')
                else:
                    row.append(str(code))
            rows.append(' '.join(row))
        return '\n'.join(rows)
