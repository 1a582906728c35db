"""Logging configuration helpers."""

import logging


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure application logging with a single stream handler."""
    logger = logging.getLogger("macro_lookup")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
