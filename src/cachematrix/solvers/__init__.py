from cachematrix.solvers.inversion import (
    InversionBackend,
    InversionError,
    NotInvertibleError,
    ShapeMismatchError,
    invert,
)
from cachematrix.solvers.solver import CachedInverseSolver, cache_solve, default_solver

__all__ = [
    "CachedInverseSolver",
    "InversionBackend",
    "InversionError",
    "NotInvertibleError",
    "ShapeMismatchError",
    "cache_solve",
    "default_solver",
    "invert",
]
