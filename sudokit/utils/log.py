# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import os
import sys
from typing import Optional

from sudokit.common.constants import LOG_LEVEL_ENV_VAR

_LOGGER_ROOT = "sudokit"
_FORMAT = "[%(asctime)s][%(levelname)s][%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _default_level() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _root_logger() -> logging.Logger:
    root = logging.getLogger(_LOGGER_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(_default_level())
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the `sudokit` namespace.

    Args:
        name (`str`): Logger name, usually `__name__`. Names outside the
            `sudokit` package are nested under it.
        level (`str`): Optional level override, e.g. "DEBUG". Defaults to the
            `SUDOKIT_LOG_LEVEL` environment variable, or INFO.

    Returns:
        `logging.Logger`: the configured logger.
    """
    root = _root_logger()
    if name is None or name == _LOGGER_ROOT:
        logger = root
    elif name.startswith(_LOGGER_ROOT + "."):
        logger = logging.getLogger(name)
    else:
        logger = root.getChild(name)
    if level is not None:
        logger.setLevel(level.upper())
    return logger
