"""
Memoized matrix inversion.

The inverse of the last requested matrix is cached; asking again for the
exact same matrix returns the cached inverse without recomputing it.
"""
from cachematrix.model.cache import CacheCell
from cachematrix.solvers.inversion import (
    InversionBackend,
    InversionError,
    NotInvertibleError,
    ShapeMismatchError,
    invert,
)
from cachematrix.solvers.solver import CachedInverseSolver, cache_solve, default_solver

__all__ = [
    "CacheCell",
    "CachedInverseSolver",
    "InversionBackend",
    "InversionError",
    "NotInvertibleError",
    "ShapeMismatchError",
    "cache_solve",
    "default_solver",
    "invert",
]
