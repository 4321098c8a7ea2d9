"""Logging helpers (no env reads)."""
import logging

LOGGER_NAME = "shopappstore"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = LOGGER_NAME, level: int | None = None) -> logging.Logger:
    """Return a library logger; handlers are attached once, on the package root."""
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_verbosity(verbose: bool) -> None:
    """Switch every ``shopappstore.*`` logger between DEBUG and WARNING."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.WARNING)
