"""
Logging configuration for Legacy Mess Detector.

Log records go to stderr through rich so they never mix with the report,
which is written to stdout. Only the ``mess_detector`` logger tree is
configured; the root logger is left to the host application.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "mess_detector"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal") -> logging.Logger:
    """
    Point the package logger at a rich handler on stderr.

    Args:
        verbosity: ``AnalysisConfig.verbosity``; quiet logs errors only,
            verbose logs everything with timestamps and source paths

    Returns:
        The configured mess_detector logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(ROOT_LOGGER)
    # Re-running the CLI in one process replaces the handler instead of stacking
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the mess_detector tree.

    ``get_logger(__name__)`` inside the package returns the module logger
    unchanged; any other name is nested under ``mess_detector``.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
