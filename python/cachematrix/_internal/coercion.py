from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .errors import ShapeError

# bool, signed/unsigned int, float, complex
_NUMERIC_KINDS = "biufc"


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def check_square(array: np.ndarray) -> None:
    if array.ndim != 2:
        raise ShapeError(f"Matrix input must be a 2D square structure (got ndim={array.ndim}).")
    rows, cols = array.shape
    if rows != cols:
        raise ShapeError(f"Matrix input must be square (rows == columns), got {rows}x{cols}.")


def coerce_square_matrix(candidate: Any) -> np.ndarray:
    """Return a private, read-only copy of ``candidate`` as a square array.

    Raises ``TypeError`` for values that are not matrix-like or not numeric,
    and ``ShapeError`` for anything that is not n x n.
    """

    if candidate is None:
        raise TypeError("Matrix data must be a square nested sequence or a NumPy array, not None.")
    if not isinstance(candidate, np.ndarray) and not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a square nested sequence or a NumPy array."
        )

    try:
        array = np.array(candidate, copy=True)
    except ValueError as exc:
        # ragged nested sequences
        raise ShapeError("Matrix data must describe a rectangular 2D structure.") from exc

    if array.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Matrix entries must be numeric (got dtype {array.dtype}).")

    check_square(array)
    array.flags.writeable = False
    return array


def coerce_inverse(candidate: Any) -> np.ndarray | None:
    """Freeze a computed inverse for storage; ``None`` means absent."""

    if candidate is None:
        return None
    array = np.array(candidate, copy=True)
    array.flags.writeable = False
    return array


def identical(a: np.ndarray, b: np.ndarray) -> bool:
    """Element-wise identity: same shape, dtype and values (NaNs in the same places)."""

    if a.shape != b.shape or a.dtype != b.dtype:
        return False
    if a.dtype.kind in "fc":
        return bool(np.array_equal(a, b, equal_nan=True))
    return bool(np.array_equal(a, b))
