"""
Conversion between the engine's Grid and the nested-list form used at the
boundary (JSON payloads, CLI files).

Malformed input is rejected here, before a Grid is built.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, TYPE_CHECKING

import numpy as np

from errors import InvalidDimensions
from grid import Grid

if TYPE_CHECKING:
    from board import Board


def _is_row_like(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def _is_binary(cell: Any) -> bool:
    if isinstance(cell, (bool, np.bool_)):
        return True
    return isinstance(cell, (int, np.integer)) and cell in (0, 1)


def grid_from_transfer(rows: Sequence[Sequence[bool]] | None) -> Grid:
    """
    Build a Grid from an ordered sequence of equally long rows of booleans
    (0 and 1 are accepted as well). Raises InvalidDimensions on missing,
    empty, ragged or non-boolean input.
    """
    if rows is None:
        raise InvalidDimensions("grid is missing")
    if not _is_row_like(rows):
        raise InvalidDimensions(f"grid must be a sequence of rows, got {type(rows).__name__}")
    if len(rows) == 0:
        raise InvalidDimensions("grid has no rows")

    width = None
    for r, row in enumerate(rows):
        if not _is_row_like(row):
            raise InvalidDimensions(f"row {r} is not a sequence")
        if width is None:
            width = len(row)
            if width == 0:
                raise InvalidDimensions("grid has no columns")
        elif len(row) != width:
            raise InvalidDimensions(f"row {r} has {len(row)} cells, expected {width}")
        for c, cell in enumerate(row):
            if not _is_binary(cell):
                raise InvalidDimensions(f"cell ({r}, {c}) is not a boolean: {cell!r}")

    return Grid([[bool(cell) for cell in row] for row in rows])


def grid_to_transfer(grid: Grid) -> List[List[bool]]:
    """Row-major nested lists of plain Python bools."""
    return [[bool(cell) for cell in row] for row in grid.to_rows()]


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Serializable view of a board at one point in time.
    """
    id: str
    grid: List[List[bool]]
    rows: int
    columns: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "grid": [list(row) for row in self.grid],
            "rows": self.rows,
            "columns": self.columns,
        }


def snapshot(board: "Board") -> BoardSnapshot:
    return BoardSnapshot(
        id=str(board.id),
        grid=grid_to_transfer(board.grid),
        rows=board.rows,
        columns=board.columns,
    )
