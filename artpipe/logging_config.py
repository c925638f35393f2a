"""File logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "artpipe-file"


def configure_logging(path: str = "artpipe.log", level: str = "INFO") -> logging.Logger:
    """Attach a file handler to the ``artpipe`` logger.

    Log records never go to stdout, which is reserved for rendered output.
    Calling this again replaces the handler installed by a previous call.
    """
    logger = logging.getLogger("artpipe")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(Path(path), encoding="utf-8")
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
