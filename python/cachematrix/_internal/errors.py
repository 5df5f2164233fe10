from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for cachematrix errors."""


class ShapeError(CacheMatrixError, ValueError):
    """Matrix input is not a 2-D square structure."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix has no inverse."""
