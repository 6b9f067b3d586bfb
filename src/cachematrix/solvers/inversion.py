"""
Matrix Inversion Routine
========================
The linear-algebra primitive whose results the solver memoizes.

Why is this file needed?
------------------------
1. Validation: Non-square input is rejected before any numeric work.
2. Errors: Backend failures are re-raised as typed errors, so callers do not
   depend on which library did the inversion.
3. Backends: SciPy (default) or NumPy, with keyword options passed through
   verbatim.

Note: This module should be pure NumPy/SciPy and keeps no state.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Any, Callable, TYPE_CHECKING

import numpy as np
import scipy as sp

from cachematrix import config
from cachematrix.utils import as_matrix

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InversionError(Exception):
    """Base class for failures of the inversion routine."""


class NotInvertibleError(InversionError, np.linalg.LinAlgError):
    """The matrix has no inverse (it is singular)."""


class ShapeMismatchError(InversionError, ValueError):
    """The matrix is not a 2-D square matrix."""


class InversionBackend(StrEnum):
    SCIPY = "scipy"
    NUMPY = "numpy"


_BACKENDS: dict[InversionBackend, Callable[..., npt.NDArray[np.float64]]] = {
    InversionBackend.SCIPY: sp.linalg.inv,
    InversionBackend.NUMPY: np.linalg.inv,
}


def resolve_backend(backend: InversionBackend | str | None = None) -> InversionBackend:
    """
    Turn a backend name into an `InversionBackend`.

    Args:
        backend: Backend or its name. None selects `config.DEFAULT_BACKEND`.

    Raises:
        ValueError: If the name is not a known backend.
    """
    name = config.DEFAULT_BACKEND if backend is None else str(backend).strip().lower()
    try:
        return InversionBackend(name)
    except ValueError:
        known = ", ".join(b.value for b in InversionBackend)
        raise ValueError(f"Unknown inversion backend: '{name}'. Expected one of: {known}.") from None


def check_square(matrix: npt.NDArray[np.float64]) -> None:
    """
    Raises:
        ShapeMismatchError: If `matrix` is not 2-D with equal row and column counts.
    """
    if matrix.ndim != 2:
        raise ShapeMismatchError(f"Expected a 2-D matrix, got an array with {matrix.ndim} dimension(s).")
    n_rows, n_cols = matrix.shape
    if n_rows != n_cols:
        raise ShapeMismatchError(f"Expected a square matrix, got shape {n_rows} x {n_cols}.")


def invert(
    matrix: npt.ArrayLike,
    backend: InversionBackend | str | None = None,
    **options: Any,
) -> npt.NDArray[np.float64]:
    """
    Compute the inverse of a square matrix.

    Args:
        matrix: The matrix to invert.
        backend: Library doing the inversion. Defaults to `config.DEFAULT_BACKEND`.
        **options: Passed through verbatim to the backend function
                   (e.g. `check_finite=False` for SciPy).

    Raises:
        ShapeMismatchError: If the matrix is not square.
        NotInvertibleError: If the matrix is singular.

    Returns:
        The inverse as a float64 array.
    """
    a = as_matrix(matrix)
    check_square(a)

    inv_func = _BACKENDS[resolve_backend(backend)]
    logger.debug(f"Inverting {a.shape[0]}x{a.shape[1]} matrix with {inv_func.__module__}.{inv_func.__name__}")
    try:
        result = inv_func(a, **options)
    except np.linalg.LinAlgError as e:
        raise NotInvertibleError(f"Matrix is not invertible: {e}") from e

    return np.asarray(result, dtype=np.float64)
