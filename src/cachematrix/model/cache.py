"""
Cache Cell
==========
Single-slot memoization record for a matrix and its inverse.

Why is this file needed?
------------------------
1. State: It holds exactly one (matrix, inverse) pair; the inverse is
   either absent (None) or belongs to the matrix stored next to it.
2. Invalidation: Replacing the matrix always discards the inverse.

Classes:
    CacheCell: The record with its get/set/get_inverse/set_inverse accessors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from cachematrix.utils import frozen_copy, identical

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class CacheCell:
    """
    Holds one matrix and, once computed, its inverse.

    Both arrays are stored as read-only copies, so neither the caller that
    supplied the matrix nor the caller that received the inverse can change
    the cached pair in place.
    """
    matrix: npt.NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 0)))
    inverse: Optional[npt.NDArray[np.float64]] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.matrix = frozen_copy(self.matrix)

    def get(self) -> npt.NDArray[np.float64]:
        """Return the stored matrix."""
        return self.matrix

    def set(self, new_matrix: npt.NDArray[np.float64]) -> None:
        """Replace the stored matrix and drop the cached inverse."""
        self.matrix = frozen_copy(new_matrix)
        self.inverse = None
        logger.debug(f"Cache cell matrix replaced ({self.matrix.shape}), inverse invalidated.")

    def get_inverse(self) -> Optional[npt.NDArray[np.float64]]:
        return self.inverse

    def set_inverse(self, new_inverse: npt.NDArray[np.float64]) -> None:
        """
        Store the inverse of the currently held matrix.

        The caller is responsible for `new_inverse` actually being the inverse
        of `self.matrix`; no check is made here.
        """
        self.inverse = frozen_copy(new_inverse)

    @property
    def has_inverse(self) -> bool:
        return self.inverse is not None

    def holds(self, matrix: npt.NDArray[np.float64]) -> bool:
        """True if `matrix` is exactly the stored matrix (same shape and values)."""
        return identical(self.matrix, matrix)
