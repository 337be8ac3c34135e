"""
Immutable rectangular boolean grid.

A Grid owns a read-only numpy array, so a reference to an earlier generation
stays a valid snapshot after the board moves on.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from errors import InvalidDimensions


class Grid:
    """
    rows x columns matrix of cells, True = alive.
    Both dimensions are strictly positive.
    """
    __slots__ = ("_cells",)

    def __init__(self, cells) -> None:
        if cells is None:
            raise InvalidDimensions("grid is missing")
        try:
            arr = np.array(cells, dtype=bool)   # always a private copy
        except (TypeError, ValueError) as exc:
            raise InvalidDimensions(f"grid is not rectangular: {exc}") from exc
        if arr.ndim != 2:
            raise InvalidDimensions(f"grid must be 2-dimensional, got {arr.ndim} dimension(s)")
        if arr.shape[0] <= 0 or arr.shape[1] <= 0:
            raise InvalidDimensions("Grid dimensions must be greater than 0")
        arr.setflags(write=False)
        self._cells = arr

    @classmethod
    def dead(cls, rows: int, columns: int) -> "Grid":
        """All-dead grid of the given size."""
        if rows <= 0 or columns <= 0:
            raise InvalidDimensions("Grid dimensions must be greater than 0")
        return cls(np.zeros((rows, columns), dtype=bool))

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        return self._cells

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(np.count_nonzero(self._cells))

    def canonical_key(self) -> bytes:
        """
        Row-major concatenation of the cell states, one byte per cell.
        Grids of the same shape are equal iff their keys are equal.
        """
        return self._cells.tobytes(order="C")

    def to_rows(self) -> list:
        return self._cells.tolist()

    def __getitem__(self, rc: Tuple[int, int]) -> bool:
        r, c = rc
        return bool(self._cells[r, c])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self.canonical_key()))

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.columns}, population={self.population})"

    def __str__(self) -> str:
        return "\n".join("".join("#" if cell else "." for cell in row) for row in self._cells)
