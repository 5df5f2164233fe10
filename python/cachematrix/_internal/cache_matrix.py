from __future__ import annotations

import threading
import warnings
from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np

from . import coercion as _coercion
from .errors import ShapeError
from .settings import get_settings
from .warnings import CacheMatrixShapeWarning


class CacheMatrix:
    """A square matrix bundled with a lazily filled cache of its inverse.

    The holder never computes anything itself; ``cache_solve`` fills the
    cache on demand through ``set_cached_inverse``. Replacing the matrix
    with a different one drops the cached inverse. Replacing it with an
    identical one keeps it, since comparing is O(n^2) and re-inverting is
    O(n^3).

    Stored arrays are read-only copies; mutate by calling ``set_matrix``.

    Not thread-safe. Callers sharing an instance across threads must hold
    ``locked()`` around every operation, including ``cache_solve``.
    """

    def __init__(self, matrix: Any = None):
        if matrix is None:
            matrix = np.empty((0, 0))
        self._matrix: np.ndarray = _coercion.coerce_square_matrix(matrix)
        self._cached_inverse: np.ndarray | None = None
        self._version = 0
        self._lock = threading.RLock()

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    def set_matrix(self, matrix: Any) -> None:
        """Replace the matrix, invalidating the cached inverse if it changed.

        A non-square or non-matrix value leaves the instance untouched and is
        reported according to the shape policy (raise, or warn and ignore).
        """

        try:
            new = _coercion.coerce_square_matrix(matrix)
        except (ShapeError, TypeError) as exc:
            if get_settings().shape_policy == "warn":
                warnings.warn(
                    f"{exc} set_matrix call ignored",
                    CacheMatrixShapeWarning,
                    stacklevel=2,
                )
                return
            raise

        if _coercion.identical(self._matrix, new):
            return

        self._matrix = new
        self._cached_inverse = None
        self._version += 1

    def get_cached_inverse(self) -> np.ndarray | None:
        return self._cached_inverse

    def set_cached_inverse(self, inverse: Any) -> None:
        # No cross-check against the matrix: the caller owns correctness.
        self._cached_inverse = _coercion.coerce_inverse(inverse)

    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None

    @property
    def version(self) -> int:
        """Bumped on every replacement that actually changed the matrix."""
        return self._version

    def rows(self) -> int:
        return int(self._matrix.shape[0])

    def cols(self) -> int:
        return int(self._matrix.shape[1])

    def size(self) -> int:
        return self.rows()

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    @contextmanager
    def locked(self) -> Iterator["CacheMatrix"]:
        with self._lock:
            yield self

    def __repr__(self) -> str:
        cached = "cached" if self.has_cached_inverse() else "empty"
        return (
            f"CacheMatrix(shape={self.shape}, dtype={self._matrix.dtype}, "
            f"inverse={cached}, version={self._version})"
        )
