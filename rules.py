from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable

import numpy as np

MOORE_SUMS = 9   # neighbor sums 0..8


@dataclass(frozen=True)
class LifeRule:
    """
    Binary Life-like rule as an 18-character bit string:
        rule_bits[0:9]   next state of a dead cell with 0..8 live neighbors
        rule_bits[9:18]  next state of a live cell with 0..8 live neighbors
    """
    rule_bits: str

    def __post_init__(self) -> None:
        if len(self.rule_bits) != 2 * MOORE_SUMS or set(self.rule_bits) - {"0", "1"}:
            raise ValueError(
                f"rule_bits must be {2 * MOORE_SUMS} characters of '0'/'1', got {self.rule_bits!r}"
            )

    def __call__(self, alive: int, neighbors: int) -> int:
        """Next state (0/1) of one cell."""
        if alive not in (0, 1):
            raise ValueError(f"cell state must be 0 or 1, got {alive}")
        if not 0 <= neighbors < MOORE_SUMS:
            raise ValueError(f"neighbor count must be in 0..8, got {neighbors}")
        return int(self.rule_bits[alive * MOORE_SUMS + neighbors])

    @cached_property
    def table(self) -> np.ndarray:
        """
        Read-only lookup table of shape (2, 9) built from the per-cell rule:
        table[alive, neighbors] is the next state as a bool.
        """
        arr = np.array(
            [[self(alive, n) for n in range(MOORE_SUMS)] for alive in (0, 1)],
            dtype=bool,
        )
        arr.setflags(write=False)
        return arr

    @classmethod
    def from_birth_survival(cls, birth: Iterable[int], survival: Iterable[int]) -> "LifeRule":
        """
        Build a rule from B/S notation, e.g. birth={3}, survival={2, 3} for B3/S23.
        """
        birth, survival = set(birth), set(survival)
        for n in birth | survival:
            if not 0 <= n < MOORE_SUMS:
                raise ValueError(f"neighbor count {n} outside 0..8")
        dead  = "".join("1" if n in birth else "0" for n in range(MOORE_SUMS))
        alive = "".join("1" if n in survival else "0" for n in range(MOORE_SUMS))
        return cls(dead + alive)


# Conway's Game of Life: born with exactly 3, survives with 2 or 3.
CONWAY = LifeRule.from_birth_survival(birth={3}, survival={2, 3})
