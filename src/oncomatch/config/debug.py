"""Logging setup for OncoMatch.

Every module logs through a child of the ``oncomatch`` logger, which owns a
single stderr handler. The level is taken from, in order of precedence:

1. ``set_log_level("DEBUG")`` (the CLI's ``--log-level`` calls this)
2. ``ONCOMATCH_LOG_LEVEL=DEBUG|INFO|WARN|ERROR``
3. ``INFO``

At DEBUG the resolver reports each pipeline decision (exact match, short
circuit, buckets added, exclusions applied).
"""

import logging
import os
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARN", "WARNING", "ERROR"]

ROOT_LOGGER_NAME = "oncomatch"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "ONCOMATCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_root: logging.Logger | None = None
_level_name: str = DEFAULT_LOG_LEVEL


def _env_level() -> str:
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return name if name in _LEVEL_MAP else DEFAULT_LOG_LEVEL


def _apply_level(logger: logging.Logger, level_name: str) -> None:
    level = _LEVEL_MAP[level_name]
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def _configure_root(level_name: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.propagate = False

    _apply_level(root, level_name)
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the oncomatch logger, or a child of it.

    The root is configured on first use. Names outside the package are
    prefixed, so ``get_logger("cli")`` is ``oncomatch.cli``.

    Example:
        logger = get_logger(__name__)
        logger.debug("Exact match for BRAF V600E")
    """
    global _root, _level_name

    if _root is None:
        _level_name = _env_level()
        _root = _configure_root(_level_name)

    if not name or name == ROOT_LOGGER_NAME:
        return _root
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: LogLevel) -> None:
    """Change the level of every oncomatch logger and export it to the environment.

    Raises:
        ValueError: If the level is not DEBUG, INFO, WARN, WARNING or ERROR
    """
    global _root, _level_name

    level_name = level.strip().upper()
    if level_name not in _LEVEL_MAP:
        raise ValueError(f"Invalid log level: {level}. Must be one of: DEBUG, INFO, WARN, ERROR")

    _level_name = level_name
    if _root is None:
        _root = _configure_root(level_name)
    else:
        _apply_level(_root, level_name)
    os.environ[LOG_LEVEL_ENV] = level_name


def get_log_level() -> str:
    return _level_name


def is_debug() -> bool:
    return _level_name == "DEBUG"


def reset_logger() -> None:
    """Drop the configured handler so the next ``get_logger`` starts fresh. Used by tests."""
    global _root, _level_name
    if _root is not None:
        _root.handlers.clear()
    _root = None
    _level_name = DEFAULT_LOG_LEVEL


# Shortcuts on the root logger

def debug(msg: str, *args, **kwargs) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs) -> None:
    get_logger().info(msg, *args, **kwargs)


def warn(msg: str, *args, **kwargs) -> None:
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs) -> None:
    get_logger().error(msg, *args, **kwargs)
