import numpy as np
import pytest

from grid import Grid
from simulate import neighbor_counts, next_generation, simulate

F, T = False, True

BLINKER_H = [[F, F, F], [T, T, T], [F, F, F]]
BLINKER_V = [[F, T, F], [F, T, F], [F, T, F]]
BLOCK = [[T, T], [T, T]]


def test_neighbor_counts_edge_and_center():
    """
    Validate neighbor counts for a 3x3 grid with ones on the diagonal:
    1 0 0
    0 1 0
    0 0 1
    """
    diag = np.eye(3, dtype=bool)
    counts = neighbor_counts(diag)
    assert counts[0, 0] == 1   # corner sees middle
    assert counts[1, 1] == 2   # centre sees two ones
    assert counts[0, 2] == 1   # far corner only sees the middle


def test_no_wraparound():
    # A live cell on the left edge must not count towards the right edge.
    grid = np.zeros((3, 4), dtype=bool)
    grid[:, 0] = True
    counts = neighbor_counts(grid)
    assert counts[1, 3] == 0
    assert counts[1, 1] == 3


def test_blinker_flips_and_returns():
    start = Grid(BLINKER_H)
    one = next_generation(start)
    assert one == Grid(BLINKER_V)
    assert next_generation(one) == start


def test_block_is_fixed_point():
    block = Grid(BLOCK)
    assert next_generation(block) == block


@pytest.mark.parametrize("shape", [(1, 1), (1, 7), (4, 4), (5, 9)])
def test_dead_grid_is_fixed_point(shape):
    dead = Grid.dead(*shape)
    assert next_generation(dead) == dead


def test_dimensions_preserved():
    rng = np.random.default_rng(3)
    g = Grid(rng.random((7, 11)) < 0.4)
    assert simulate(g, 25).shape == (7, 11)


def test_input_not_mutated():
    start = Grid(BLINKER_H)
    before = start.canonical_key()
    result = next_generation(start)
    assert start.canonical_key() == before
    assert result is not start


@pytest.mark.parametrize(
    "grid,expected_center",
    [
        # live centre, 2 neighbors -> survives
        ([[T, T, F], [F, T, F], [F, F, F]], T),
        # live centre, 3 neighbors -> survives
        ([[T, T, T], [F, T, F], [F, F, F]], T),
        # live centre, 1 neighbor -> dies
        ([[T, F, F], [F, T, F], [F, F, F]], F),
        # live centre, 4 neighbors -> dies
        ([[T, T, T], [T, T, F], [F, F, F]], F),
        # dead centre, 3 neighbors -> born
        ([[T, T, T], [F, F, F], [F, F, F]], T),
        # dead centre, 2 neighbors -> stays dead
        ([[T, T, F], [F, F, F], [F, F, F]], F),
        # dead centre, 4 neighbors -> stays dead
        ([[T, T, T], [T, F, F], [F, F, F]], F),
    ],
)
def test_center_cell_rule(grid, expected_center):
    assert next_generation(Grid(grid))[1, 1] is expected_center


def test_multi_step_consistency():
    rng = np.random.default_rng(11)
    g = Grid(rng.random((6, 6)) < 0.5)
    one = next_generation(g)
    two = next_generation(one)
    assert simulate(g, 2) == two
    assert simulate(g, 0) == g


def test_glider_moves():
    glider = Grid([
        [F, T, F, F, F],
        [F, F, T, F, F],
        [T, T, T, F, F],
        [F, F, F, F, F],
        [F, F, F, F, F],
    ])
    moved = Grid([
        [F, F, F, F, F],
        [F, F, T, F, F],
        [F, F, F, T, F],
        [F, T, T, T, F],
        [F, F, F, F, F],
    ])
    assert simulate(glider, 4) == moved
