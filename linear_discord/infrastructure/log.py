"""Process logging setup.

Modules obtain loggers with ``logging.getLogger(__name__)``; ``setup_logging``
is called once from the entry point and attaches a single stderr handler to
the root logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_initialized = False


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger. Calling it again only updates the level."""
    global _initialized
    root = logging.getLogger()
    root.setLevel(level)
    if _initialized:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True
