from __future__ import annotations
import numpy as np

# Array views of a grid, indexed [y, x]:
# - hazard / revealed / flagged boolean masks
# - adjacency counts from a hazard mask (sum of the eight shifted copies)
# - state codes for rendering: -3 hidden, -2 flagged, -1 revealed hazard, 0..8 counts

HIDDEN = -3
FLAGGED = -2
DETONATED = -1


def adjacency_counts(mask: np.ndarray) -> np.ndarray:
    mask = np.asarray(mask, dtype=np.int8)
    height, width = mask.shape
    padded = np.pad(mask, 1)
    counts = np.zeros((height, width), dtype=np.int8)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]
    return counts


def hazard_mask(board) -> np.ndarray:
    return np.array([[c.is_hazard for c in row] for row in board.grid], dtype=bool)


def revealed_mask(board) -> np.ndarray:
    return np.array([[c.is_revealed for c in row] for row in board.grid], dtype=bool)


def flagged_mask(board) -> np.ndarray:
    return np.array([[c.is_flagged for c in row] for row in board.grid], dtype=bool)


def state_codes(board) -> np.ndarray:
    codes = np.full((board.height, board.width), HIDDEN, dtype=np.int8)
    for y, row in enumerate(board.grid):
        for x, c in enumerate(row):
            if c.is_revealed:
                codes[y, x] = DETONATED if c.is_hazard else c.adj_hazards
            elif c.is_flagged:
                codes[y, x] = FLAGGED
    return codes
