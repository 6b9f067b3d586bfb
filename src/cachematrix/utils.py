from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def as_matrix(matrix: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Convert an array-like to a float64 NumPy array (no copy if already one)."""
    return np.asarray(matrix, dtype=np.float64)


def identical(a: npt.NDArray[np.float64], b: npt.NDArray[np.float64]) -> bool:
    """
    Exact structural equality of two matrices.

    Two matrices are identical when they have the same shape and every element
    compares equal. There is no tolerance: a single differing bit in one element
    makes the matrices different. NaN is considered equal to NaN at the same
    position, and -0.0 equal to 0.0.

    Args:
        a: First matrix.
        b: Second matrix.

    Returns:
        True if both arrays have equal shape and values.

    **Example**:

        >>> identical(np.eye(2), np.eye(2))
        True
        >>> identical(np.eye(2), np.eye(3))
        False
        >>> identical(np.array([[np.nan]]), np.array([[np.nan]]))
        True
    """
    if a.shape != b.shape:
        return False
    return bool(np.array_equal(a, b, equal_nan=True))


def frozen_copy(array: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Return a read-only copy of `array`."""
    out = np.array(array, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out
