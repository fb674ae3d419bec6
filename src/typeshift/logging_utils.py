"""Logger setup for the Typeshift solver."""

import logging

from typeshift.solver.config import config as solver_config

LOGGER_NAME = "typeshift"
"""Name of the package-wide logger."""


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the `typeshift` logger, or one of its children.

    If the package logger has no handler yet, a stream handler is attached and the level is
    taken from the solver configuration.

    Args:
        name: Optional child name, e.g. `"solver"` for `typeshift.solver`.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(solver_config.log_level.upper())

    return logger.getChild(name) if name else logger
