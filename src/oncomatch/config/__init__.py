"""Configuration module for OncoMatch.

Constants are available via: from oncomatch.config.constants import ...
Resolver settings: from oncomatch.config.settings import ResolverConfig
Debug/logging: from oncomatch.config.debug import get_logger, set_log_level
"""

from oncomatch.config.debug import (
    get_logger,
    set_log_level,
    get_log_level,
    is_debug,
    debug,
    info,
    warn,
    error,
)

__all__ = [
    "get_logger",
    "set_log_level",
    "get_log_level",
    "is_debug",
    "debug",
    "info",
    "warn",
    "error",
]
