"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from cachematrix import config
from cachematrix.logging_config import setup_logging
from cachematrix.solvers.inversion import InversionBackend, InversionError, resolve_backend
from cachematrix.solvers.solver import CachedInverseSolver, default_solver
from cachematrix.utils import identical

logger = logging.getLogger(__name__)


class InverseCheckError(AssertionError):
    """The computed inverse does not reproduce the identity."""


def check_cache_solve(n: int, solver: CachedInverseSolver | None = None) -> np.ndarray:
    """
    Invert identity(n) through the solver and check the result.

    Calling this twice in a row with the same `n` (and solver) is answered from
    the cache the second time.

    Raises:
        InverseCheckError: If `m @ inverse` is not exactly `m`.
    """
    solver = solver if solver is not None else default_solver
    m = np.eye(n)
    m_inv = solver.solve(m)

    if not identical(m, m @ m_inv):
        raise InverseCheckError("Incorrect matrix inverse result !!")

    logger.info(f"The correct matrix inverse for\n{m}\nis\n{m_inv}")
    return m_inv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cachematrix",
        description="Invert identity(N) through the memoizing solver and verify the result.",
    )
    parser.add_argument("n", type=int, help="size of the identity matrix")
    parser.add_argument("--repeat", type=int, default=2,
                        help="number of solves; every solve after the first is a cache hit (default: 2)")
    parser.add_argument("--backend", choices=[b.value for b in InversionBackend], default=None,
                        help=f"inversion backend (default: {config.DEFAULT_BACKEND})")
    parser.add_argument("--log-level", default=config.DEFAULT_LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    if args.n < 0:
        logger.error(f"Matrix size must be non-negative, got {args.n}.")
        return 2
    if args.repeat < 1:
        logger.error(f"Repeat count must be at least 1, got {args.repeat}.")
        return 2

    try:
        backend = resolve_backend(args.backend)
    except ValueError as e:
        logger.error(str(e))
        return 2

    solver = CachedInverseSolver(backend=backend)
    try:
        for _ in range(args.repeat):
            check_cache_solve(args.n, solver)
    except (InversionError, InverseCheckError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
