# color_token_report/report/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the report stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Resolver, pairing, render settings, the message router, the demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
