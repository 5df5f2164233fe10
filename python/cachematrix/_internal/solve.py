from __future__ import annotations

from typing import Any, Callable

from . import linalg as _linalg
from . import observability as _observability


def cache_solve(
    cache: Any,
    *args: Any,
    inverter: Callable[..., Any] | None = None,
    observer: _observability.SolveObservability | None = None,
    **options: Any,
) -> Any:
    """Return the inverse of ``cache.get_matrix()``, computing it at most once.

    A cached inverse is returned as-is and recorded as a hit. Otherwise
    ``inverter(matrix, *args, **options)`` runs (``linalg.invert`` by
    default), its result is stored on ``cache`` and the call is recorded as
    a miss.

    Errors from the inverter propagate unchanged and nothing is cached, so
    the next call tries again.
    """

    obs = observer if observer is not None else _observability.default_instance()

    inverse = cache.get_cached_inverse()
    if inverse is not None:
        obs.record("hit", cache)
        return inverse

    invert = inverter if inverter is not None else _linalg.invert
    data = cache.get_matrix()
    inverse = invert(data, *args, **options)
    cache.set_cached_inverse(inverse)
    obs.record("miss", cache)
    # Misses and later hits hand back the same frozen array.
    stored = cache.get_cached_inverse()
    return stored if stored is not None else inverse
