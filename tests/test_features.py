import numpy as np

from gridsweep.features import (
    DETONATED, FLAGGED, HIDDEN, adjacency_counts, flagged_mask, hazard_mask, state_codes,
)


def test_adjacency_counts_full_board():
    counts = adjacency_counts(np.ones((3, 3), dtype=bool))
    assert counts.tolist() == [[3, 5, 3], [5, 8, 5], [3, 5, 3]]


def test_adjacency_counts_single_cell():
    assert adjacency_counts(np.zeros((1, 1), dtype=bool)).tolist() == [[0]]


def test_masks_and_state_codes(make_grid):
    grid = make_grid(3, 2, [(0, 0)])
    grid.flag(0, 1)
    grid.reveal(2, 0)
    assert hazard_mask(grid).tolist() == [[True, False, False], [False, False, False]]
    assert flagged_mask(grid).tolist() == [[False, False, False], [True, False, False]]
    assert state_codes(grid).tolist() == [[HIDDEN, 1, 0], [FLAGGED, 1, 0]]
    grid.reveal(0, 0)
    assert state_codes(grid)[0, 0] == DETONATED
