"""Memoized matrix inversion.

Wrap a square matrix in a ``CacheMatrix`` once, then call ``cache_solve``
as often as needed; the inverse is computed on the first call and reused
until ``set_matrix`` installs a different matrix.
"""
from __future__ import annotations

__version__ = "0.1.0"

from ._internal.cache_matrix import CacheMatrix
from ._internal.errors import CacheMatrixError, ShapeError, SingularMatrixError
from ._internal.factories import make_cache_matrix
from ._internal.linalg import invert
from ._internal.observability import SolveObservability, SolveRecord
from ._internal.observability import default_instance as _default_observability
from ._internal.settings import (
    Settings,
    get_settings,
    set_shape_policy,
    temporary_shape_policy,
)
from ._internal.solve import cache_solve
from ._internal.warnings import CacheMatrixShapeWarning, CacheMatrixWarning


def last_solve_event(event: str | None = None) -> dict[str, object] | None:
    """Most recent hit/miss record from the default recorder."""
    return _default_observability().last(event)


def solve_stats() -> dict[str, int]:
    return _default_observability().stats()


def clear_solve_events() -> None:
    _default_observability().clear()


__all__ = [
    "CacheMatrix",
    "CacheMatrixError",
    "CacheMatrixShapeWarning",
    "CacheMatrixWarning",
    "Settings",
    "ShapeError",
    "SingularMatrixError",
    "SolveObservability",
    "SolveRecord",
    "cache_solve",
    "clear_solve_events",
    "get_settings",
    "invert",
    "last_solve_event",
    "make_cache_matrix",
    "set_shape_policy",
    "solve_stats",
    "temporary_shape_policy",
]
