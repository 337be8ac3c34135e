"""
Settings for the registry and the command line, loaded from YAML.

Example life.yaml:

    max_iterations: 1000
    event_log: logs/events.log
    density: 0.35
    seed: 7
"""
from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Optional

import yaml

DEFAULT_MAX_ITERATIONS = 1000


@dataclass
class Settings:
    """
    Attributes:
        max_iterations: transition bound for the final-state search
        event_log: JSONL file receiving one record per operation (None = off)
        density: probability a cell starts alive in random grids
        seed: RNG seed for random grids
    """
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    event_log: Optional[pathlib.Path] = None
    density: float = 0.5
    seed: int = 42

    def __post_init__(self) -> None:
        if self.event_log is not None:
            if not isinstance(self.event_log, (str, os.PathLike)):
                raise ValueError(f"event_log must be a path, got {self.event_log!r}")
            self.event_log = pathlib.Path(self.event_log)
        self._validate()

    def _validate(self) -> None:
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
            raise ValueError(f"max_iterations must be an integer, got {self.max_iterations!r}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be > 0, got {self.max_iterations}")
        if isinstance(self.density, bool) or not isinstance(self.density, (int, float)):
            raise ValueError(f"density must be a number, got {self.density!r}")
        if not 0 <= self.density <= 1:
            raise ValueError(f"density must be in [0, 1], got {self.density}")
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        if d["event_log"] is not None:
            d["event_log"] = str(d["event_log"])
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Settings":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown settings: {sorted(unknown)}")
        return cls(**d)

    def merged(self, **overrides: Any) -> "Settings":
        """Copy with every non-None override applied (command-line flags)."""
        d = asdict(self)
        d.update({k: v for k, v in overrides.items() if v is not None})
        return Settings.from_dict(d)


def load_settings(path: pathlib.Path | None) -> Settings:
    if path is None:
        return Settings()
    try:
        data = yaml.safe_load(pathlib.Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: invalid YAML: {exc}") from exc
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return Settings.from_dict(data)
