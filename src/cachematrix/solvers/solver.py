"""
Memoizing Inverse Solver
========================
Returns the inverse of a matrix, reusing the last result when the same
matrix is requested again.

Why is this file needed?
------------------------
1. Memoization: Inversion is expensive; a repeated request for the exact same
   matrix is answered from the cache cell without recomputing.
2. Invalidation: Any structurally different matrix (shape or a single
   element) replaces the cell, so at most one inverse is ever cached.
3. Process-wide slot: `default_solver` and `cache_solve` give callers a single
   cache shared across the whole process. Tests build their own
   `CachedInverseSolver` instances instead.

Note: No locking. The solver assumes sequential callers.
"""
from __future__ import annotations

from functools import partial
import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

import numpy as np

from cachematrix import config
from cachematrix.model.cache import CacheCell
from cachematrix.solvers.inversion import InversionBackend, invert
from cachematrix.utils import as_matrix

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class CachedInverseSolver:
    """
    Matrix inverse with a single-entry cache.
    """

    def __init__(
        self,
        inverter: Callable[..., npt.NDArray[np.float64]] = invert,
        backend: InversionBackend | str | None = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the solver with an empty cache.

        Args:
            inverter: Inversion routine, called as `inverter(matrix, **options)`.
            backend: If given, passed to `inverter` as its `backend` keyword.
            log: Logger receiving the cache-hit notification. Defaults to the
                 module logger.
        """
        self.inverter = partial(inverter, backend=backend) if backend is not None else inverter
        self.log = log if log is not None else logger
        self.cell: Optional[CacheCell] = None

    def __repr__(self) -> str:
        if self.cell is None:
            state = "empty"
        else:
            state = f"shape={self.cell.get().shape}, cached={self.cell.has_inverse}"
        return f"{self.__class__.__name__}({state})"

    def reset(self) -> None:
        """Discard the cache cell."""
        self.cell = None

    def solve(self, matrix: npt.ArrayLike, **options: Any) -> npt.NDArray[np.float64]:
        """
        Return the inverse of `matrix`, from the cache when possible.

        Args:
            matrix: The matrix to invert.
            **options: Passed through verbatim to the inversion routine.

        Raises:
            ShapeMismatchError: If the matrix is not square.
            NotInvertibleError: If the matrix is singular. The matrix stays in
                                the cell with no inverse, so a retry inverts again.

        Returns:
            The inverse matrix (read-only array).
        """
        requested = as_matrix(matrix)

        if self.cell is None or not self.cell.holds(requested):
            self.cell = CacheCell(requested)
            logger.debug(f"New cache cell for {requested.shape} matrix.")

        inverse = self.cell.get_inverse()
        if inverse is not None:
            self.log.info(config.CACHE_HIT_MESSAGE)
            return inverse

        logger.debug("Cache miss, computing inverse.")
        mat = self.cell.get()
        self.cell.set_inverse(self.inverter(mat, **options))
        return self.cell.get_inverse()


# Process-wide single cache slot
default_solver = CachedInverseSolver()


def cache_solve(matrix: npt.ArrayLike, **options: Any) -> npt.NDArray[np.float64]:
    """Invert `matrix` through the process-wide `default_solver`."""
    return default_solver.solve(matrix, **options)
