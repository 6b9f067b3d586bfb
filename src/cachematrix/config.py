"""
Configuration
=============
Central registry for global constants.

Values that make sense to change per environment (inversion backend, log
level) are read from environment variables once, at import time.

Exports:
    DEFAULT_BACKEND (str): Name of the inversion backend used when none is given.
    DEFAULT_LOG_LEVEL (str): Log level name used by the command-line harness.
    CACHE_HIT_MESSAGE (str): Diagnostic message emitted on a cache hit.
"""
import os


BACKEND_ENV_VAR: str = "CACHEMATRIX_BACKEND"
LOG_LEVEL_ENV_VAR: str = "CACHEMATRIX_LOG_LEVEL"

# Global Constants
DEFAULT_BACKEND: str = os.environ.get(BACKEND_ENV_VAR, "scipy").strip().lower()
DEFAULT_LOG_LEVEL: str = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()

CACHE_HIT_MESSAGE: str = "getting the cached inverse matrix"
