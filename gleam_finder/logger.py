# === FILE: gleam_finder/logger.py ===
"""Logging for **GleamFinder**.

Everything logs through the single ``GleamFinder`` logger::

    from gleam_finder.logger import logger
    logger.info("Resolving %s", url)

Records go to stderr (stdout carries the JSON output of the CLI) and,
when the CLI gets ``--log-file``, to a rotating file as well.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "GleamFinder"


def init_logging(
    level: Union[int, str] = "WARNING", log_file: str | Path | None = None
) -> logging.Logger:
    """Replace the handlers of the project logger and apply *level*."""
    formatter = logging.Formatter(_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        )

    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)
    lg.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging"]
