"""
Request/response layer over the board registry.

Each entry point returns a Response with an HTTP-style status and a JSON-ready
body, so a web or CLI front end only has to forward it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from errors import InvalidArgument, InvalidDimensions, LifeError, NoStableStateFound, NotFound
from registry import BoardId, BoardRegistry, Outcome
from transfer import snapshot

OK = 200
BAD_REQUEST = 400
NOT_FOUND = 404
UNPROCESSABLE = 422   # iteration bound exhausted

STATUS_FOR_ERROR = {
    InvalidDimensions: BAD_REQUEST,
    InvalidArgument: BAD_REQUEST,
    NotFound: NOT_FOUND,
    NoStableStateFound: UNPROCESSABLE,
}


@dataclass(frozen=True)
class Response:
    status: int
    body: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status == OK


def error_body(error: LifeError) -> Dict[str, Any]:
    return {"error": type(error).__name__, "message": str(error)}


def to_response(outcome: Outcome) -> Response:
    if outcome.error is not None:
        status = STATUS_FOR_ERROR.get(type(outcome.error), BAD_REQUEST)
        return Response(status, error_body(outcome.error))
    return Response(OK, snapshot(outcome.board).to_dict())


class GameApi:
    def __init__(self, registry: Optional[BoardRegistry] = None):
        self.registry = registry if registry is not None else BoardRegistry()

    def create(self, payload: Any) -> Response:
        """Accepts a bare nested list or a mapping with a "grid" key."""
        grid = payload.get("grid") if isinstance(payload, dict) else payload
        return to_response(self.registry.create_board(grid))

    def get_board(self, board_id: BoardId) -> Response:
        return to_response(self.registry.get(board_id))

    def get_next(self, board_id: BoardId) -> Response:
        return to_response(self.registry.advance_one(board_id))

    def get_after_generations(self, board_id: BoardId, count: int) -> Response:
        return to_response(self.registry.advance_n(board_id, count))

    def get_final(self, board_id: BoardId) -> Response:
        return to_response(self.registry.advance_to_stable(board_id))
