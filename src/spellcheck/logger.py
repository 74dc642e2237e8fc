import logging
import sys

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Namespaced logger with one stream handler, e.g. get_logger("data.loader")."""
    logger = logging.getLogger(f"spellcheck.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL.upper())
        logger.propagate = False
    return logger
