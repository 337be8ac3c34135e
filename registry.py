"""
In-memory board registry.

The registry owns every board, keyed by id. Each operation returns an Outcome
carrying either the resulting Board or one typed error; a failed operation
never touches the stored boards.
"""
from __future__ import annotations

import numbers
import pathlib
import sys
import uuid
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional, Union

from board import Board
from config import DEFAULT_MAX_ITERATIONS
from errors import InvalidArgument, LifeError, NoStableStateFound, NotFound
from event_log import log_event
from simulate import simulate

BoardId = Union[uuid.UUID, str]


@dataclass(frozen=True)
class Outcome:
    """
    Result of a registry operation.

    Exactly one of `board` / `error` is set. `generations` is the number of
    transitions computed to reach `board` (0 for create and get).
    """
    board: Optional[Board] = None
    error: Optional[LifeError] = None
    generations: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Board:
        """Return the board, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.board


def _parse_id(board_id: BoardId) -> Optional[uuid.UUID]:
    if isinstance(board_id, uuid.UUID):
        return board_id
    if isinstance(board_id, str):
        try:
            return uuid.UUID(board_id)
        except ValueError:
            return None
    return None


def _not_found(board_id: BoardId) -> Outcome:
    return Outcome(error=NotFound(f"Board {board_id} not found"))


class BoardRegistry:
    """
    Owns the id -> Board mapping. One lock guards each operation from lookup
    to replacement, so a reader sees either the old or the new board.
    """

    def __init__(self, *, max_iterations: int = DEFAULT_MAX_ITERATIONS,
                 event_log: pathlib.Path | None = None):
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be > 0, got {max_iterations}")
        self.max_iterations = max_iterations
        self.event_log = event_log
        self._boards: Dict[uuid.UUID, Board] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._boards)

    def __contains__(self, board_id: BoardId) -> bool:
        key = _parse_id(board_id)
        with self._lock:
            return key is not None and key in self._boards

    # Operations
    def create_board(self, grid) -> Outcome:
        """Register a new board from a Grid or nested sequence of booleans."""
        try:
            board = Board.create(grid)
        except LifeError as exc:
            return self._record("create_board", None, Outcome(error=exc))
        with self._lock:
            self._boards[board.id] = board
        return self._record("create_board", board.id, Outcome(board=board))

    def get(self, board_id: BoardId) -> Outcome:
        with self._lock:
            board = self._lookup(board_id)
        if board is None:
            return self._record("get", board_id, _not_found(board_id))
        return Outcome(board=board)

    def advance_one(self, board_id: BoardId) -> Outcome:
        with self._lock:
            board = self._lookup(board_id)
            if board is None:
                outcome = _not_found(board_id)
            else:
                board = board.advance()
                self._boards[board.id] = board
                outcome = Outcome(board=board, generations=1)
        return self._record("advance_one", board_id, outcome)

    def advance_n(self, board_id: BoardId, n: int) -> Outcome:
        """Apply n transitions and store only the last one."""
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
            return self._record(
                "advance_n", board_id,
                Outcome(error=InvalidArgument(f"Number of generations must be greater than 0, got {n!r}")),
            )
        n = int(n)
        with self._lock:
            board = self._lookup(board_id)
            if board is None:
                outcome = _not_found(board_id)
            else:
                board = Board(grid=simulate(board.grid, n), id=board.id)
                self._boards[board.id] = board
                outcome = Outcome(board=board, generations=n)
        return self._record("advance_n", board_id, outcome)

    def advance_to_stable(self, board_id: BoardId) -> Outcome:
        """
        Advance until a configuration repeats any earlier one (generation 0
        included) and store that state. Fixed points repeat after one step;
        oscillators repeat after their period.

        At most `max_iterations` transitions are computed; when none of them
        repeats, NoStableStateFound is returned and the stored board is kept.
        """
        with self._lock:
            board = self._lookup(board_id)
            if board is None:
                outcome = _not_found(board_id)
            else:
                outcome = self._search(board)
                if outcome.ok:
                    self._boards[board.id] = outcome.board
        return self._record("advance_to_stable", board_id, outcome)

    # Helpers
    def _search(self, board: Board) -> Outcome:
        seen = {board.grid.canonical_key()}
        for generation in range(1, self.max_iterations + 1):
            board = board.advance()
            key = board.grid.canonical_key()
            if key in seen:
                return Outcome(board=board, generations=generation)
            seen.add(key)
        return Outcome(error=NoStableStateFound(
            f"Board did not reach a final state after {self.max_iterations} iterations"
        ))

    def _lookup(self, board_id: BoardId) -> Optional[Board]:
        # caller holds the lock
        key = _parse_id(board_id)
        if key is None:
            return None
        return self._boards.get(key)

    def _record(self, op: str, board_id: Optional[BoardId], outcome: Outcome) -> Outcome:
        """
        Append the outcome to the event log, if one is configured. Runs after
        the lock is released; a write failure is reported on stderr and the
        outcome is returned unchanged.
        """
        if self.event_log is None:
            return outcome
        board = None if board_id is None else str(board_id)
        if outcome.ok:
            b = outcome.board
            fields = dict(generations=outcome.generations, rows=b.rows, columns=b.columns,
                          population=b.grid.population)
            status = "ok"
        else:
            fields = dict(message=str(outcome.error))
            status = type(outcome.error).__name__
        try:
            log_event(op, board, status, log_file=self.event_log, **fields)
        except OSError as exc:
            sys.stderr.write(f"[warn] could not write event log {self.event_log}: {exc}\n")
        return outcome
