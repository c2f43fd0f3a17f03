"""Package logger for nanomvvm.

Library code logs through ``logger``; applications decide where the
records go. ``setup_logging`` is a convenience for scripts and the demo.
"""

import logging

LOGGER_NAME = "nanomvvm"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(getattr(h, "_nanomvvm_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._nanomvvm_console = True
        logger.addHandler(handler)

    return logger
