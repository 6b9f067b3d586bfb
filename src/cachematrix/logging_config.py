"""
Logging Configuration
=====================
Handlers for the command-line harness.

The library modules only create their loggers (`logging.getLogger(__name__)`)
and never attach handlers; `python -m cachematrix` calls `setup_logging` so
that cache hits, misses and inversion errors become visible on stdout and,
optionally, in a log file.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER: str = "cachematrix"
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT: str = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach stdout (and optional file) handlers to the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level for the package logger and its handlers.
        log_file: Optional path of a log file, truncated on open.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.info("Logging initialized.")
    return package_logger
