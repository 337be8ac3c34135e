from __future__ import annotations

import numpy as np

from grid import Grid
from rules import CONWAY, LifeRule


def neighbor_counts(cells: np.ndarray) -> np.ndarray:
    """
    Return number of live neighbors (Moore, eight cells) for every cell.
    Out-of-bounds neighbors are treated as 0 (dead).
    """
    h, w = cells.shape
    padded = np.pad(cells.astype(np.uint8), 1)   # zero boundary, no wraparound
    total = np.zeros((h, w), dtype=np.uint8)
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            total += padded[1 + dr:1 + dr + h, 1 + dc:1 + dc + w]
    return total


def next_generation(grid: Grid, rule: LifeRule = CONWAY) -> Grid:
    """
    One synchronous update (Moore neighborhood, zero boundary).
    The input grid is left untouched; the result is a new Grid of the same shape.
    """
    cells = grid.cells
    table = rule.table
    return Grid(table[cells.astype(np.intp), neighbor_counts(cells)])


def simulate(grid: Grid, generations: int = 1, rule: LifeRule = CONWAY) -> Grid:
    curr = grid
    for _ in range(generations):
        curr = next_generation(curr, rule)
    return curr
