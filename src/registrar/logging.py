"""Logging setup for the Registrar service.

Every component logs through ``logging.getLogger(__name__)``; the records land
under the ``registrar`` logger, which this module wires to a rotating file
and, optionally, the console.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from registrar.config import Settings

LOG_FILE = "registrar.log"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings, console: bool = True) -> logging.Logger:
    """Attach the rotating file handler described by ``settings``.

    Safe to call more than once: handlers from an earlier call are closed and
    replaced.

    Args:
        settings: Runtime settings; ``log_dir``, ``log_level``,
            ``log_max_bytes`` and ``log_backup_count`` are used.
        console: Whether records are also written to stderr.

    Returns:
        The ``registrar`` logger.
    """
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logger = logging.getLogger("registrar")
    logger.setLevel(log_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_dir / LOG_FILE,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        "Registrar logging initialized (level=%s, file=%s)",
        settings.log_level,
        log_dir / LOG_FILE,
    )
    return logger
