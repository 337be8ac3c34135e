from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace

from errors import InvalidDimensions
from grid import Grid
from simulate import next_generation
from transfer import grid_from_transfer


@dataclass(frozen=True)
class Board:
    '''
    A board is an id plus its current grid. Advancing keeps the id and swaps
    in the next generation's grid; the old Board object is left as it was.
    '''
    grid: Grid
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.grid, Grid):
            raise InvalidDimensions("board needs a Grid; convert nested lists with Board.create")

    @classmethod
    def create(cls, grid) -> "Board":
        '''
        New board with a fresh id from a Grid or a nested sequence of booleans.
        '''
        if not isinstance(grid, Grid):
            grid = grid_from_transfer(grid)
        return cls(grid=grid)

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def columns(self) -> int:
        return self.grid.columns

    def advance(self) -> "Board":
        return replace(self, grid=next_generation(self.grid))
