from __future__ import annotations

import warnings
from typing import Any

from .cache_matrix import CacheMatrix
from .errors import ShapeError
from .settings import get_settings
from .warnings import CacheMatrixShapeWarning


def make_cache_matrix(matrix: Any = None) -> CacheMatrix | None:
    """Build a ``CacheMatrix``, reporting non-square input per the shape policy.

    Omitting ``matrix`` gives an empty 0x0 holder. Under the ``"warn"``
    policy a non-square or non-matrix value yields a
    ``CacheMatrixShapeWarning`` and ``None`` instead of an instance.
    """

    try:
        return CacheMatrix(matrix)
    except (ShapeError, TypeError) as exc:
        if get_settings().shape_policy != "warn":
            raise
        warnings.warn(f"{exc} None returned", CacheMatrixShapeWarning, stacklevel=2)
        return None
