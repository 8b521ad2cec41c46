"""
Logging Management Module

The package logs through one named logger. On import it carries only a
NullHandler, so a library user sees nothing unless they opt in. Scripts opt
in with ``setup_logger``, which attaches console output and, once a log
directory is known, a rotating log file.

Handlers installed here are tagged, so reconfiguration replaces them without
touching handlers the host application attached itself.
"""

# Standard Imports
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional

# Internal Imports
from ..paths import DEBUG_ENV_VAR, LOGGER_NAME

_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Marker attribute set on handlers owned by this module
_OWNED: Final[str] = "_folderfun_owned"

# Rotation policy for log files
MAX_BYTES: Final[int] = 1024 * 1024
BACKUP_COUNT: Final[int] = 3


# SETUP
def setup_logger(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Attaches console (and optionally file) output to the package logger.

    Calling it again replaces the handlers from the previous call, so a
    script can move from console-only to console + file once its run
    directory exists.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        log_dir: Directory for a rotating ``<name>_<UTC timestamp>.log`` file.
        name: Logger identifier.

    Returns:
        The configured logging.Logger.

    Environment Variables:
        FOLDERFUN_DEBUG: If set to "1", overrides level to DEBUG.
    """
    if os.getenv(DEBUG_ENV_VAR) == "1":
        numeric_level = logging.DEBUG
    else:
        numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = reset_logger(name)
    logger.setLevel(numeric_level)
    formatter = logging.Formatter(_FORMAT, _DATE_FORMAT)

    console_h = logging.StreamHandler(sys.stdout)
    _attach(logger, console_h, formatter)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        file_h = RotatingFileHandler(
            log_dir / f"{name}_{timestamp}.log",
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        _attach(logger, file_h, formatter)

    return logger


def reset_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Closes and detaches every handler previously installed by setup_logger."""
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        if getattr(handler, _OWNED, False):
            handler.close()
            logger.removeHandler(handler)
    return logger


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    setattr(handler, _OWNED, True)
    logger.addHandler(handler)


# Silent by default: records go nowhere until the host opts in.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())
