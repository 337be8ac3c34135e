"""
Error types shared by the engine, the registry and the boundary layer.
"""
from __future__ import annotations


class LifeError(Exception):
    """Base class for every failure the engine reports."""


class InvalidDimensions(LifeError, ValueError):
    """Grid is missing, empty, ragged, malformed or has a zero dimension."""


class NotFound(LifeError, LookupError):
    """No board is registered under the requested id."""


class InvalidArgument(LifeError, ValueError):
    """Generation count is not a positive integer."""


class NoStableStateFound(LifeError, RuntimeError):
    """The iteration bound ran out before any configuration repeated."""
