from __future__ import annotations

from typing import Any

import numpy as np

from .errors import SingularMatrixError


def invert(matrix: Any) -> np.ndarray:
    """Dense inverse of ``matrix``.

    Delegates to LAPACK through ``numpy.linalg.inv``. A singular matrix
    raises ``SingularMatrixError``, chained from NumPy's ``LinAlgError``.
    """

    a = np.asarray(matrix)
    try:
        return np.linalg.inv(a)
    except np.linalg.LinAlgError as exc:
        if "singular" in str(exc).lower():
            raise SingularMatrixError(f"matrix of shape {a.shape} is singular") from exc
        raise
