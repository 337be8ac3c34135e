from __future__ import annotations

import numpy as np

from errors import InvalidDimensions
from grid import Grid
from simulate import next_generation


class RandomGridGenerator:
    """
    Seeded random starting grids for Game of Life boards.
    Each cell is alive with probability `density`.
    """
    def __init__(self, rows: int, columns: int, *, seed: int = 42, density: float = 0.5):
        if rows <= 0 or columns <= 0:
            raise InvalidDimensions("Grid dimensions must be greater than 0")
        if not 0 <= density <= 1:
            raise ValueError(f"density must be in [0, 1], got {density}")
        self.rows = rows
        self.columns = columns
        self.density = density
        self.rng = np.random.default_rng(seed)

    def _make_grid(self) -> Grid:
        return Grid(self.rng.random((self.rows, self.columns)) < self.density)

    @staticmethod
    def is_trivial(grid: Grid) -> bool:
        """
        Return True if the grid is trivial: all cells dead, all alive, or
        if one step leaves the grid unchanged.
        """
        population = grid.population
        if population == 0 or population == grid.rows * grid.columns:
            return True
        return next_generation(grid) == grid

    def generate(self, trim_trivial: bool = True, max_attempts: int = 100) -> Grid:
        '''
        Draw grids until one is non-trivial (or return the first draw when
        trim_trivial is False).
        '''
        for _ in range(max_attempts):
            grid = self._make_grid()
            if not trim_trivial or not self.is_trivial(grid):
                return grid
        raise RuntimeError(
            f"Could not create a nontrivial {self.rows}x{self.columns} grid "
            f"in {max_attempts} attempts."
        )
