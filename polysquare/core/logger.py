import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "polysquare"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a Rich console handler to the package logger.

    Safe to call more than once: the handler is only installed the first time,
    later calls just update the level.

    Args:
        level: Minimum severity name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured ``polysquare`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
