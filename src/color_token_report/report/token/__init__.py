# report/token/__init__.py
"""
token.
=====

Does: Provide token-name normalization and the ColorToken wrapper.
Exports: normalize_token, split_token_name, ColorToken, GLOBAL_NAMESPACE
Used by: Pairing, report building, rendering.
"""

from __future__ import annotations

from .color_token import BACKGROUND, FOREGROUND, ColorToken
from .normalize import GLOBAL_NAMESPACE, NAME_SEPARATOR, normalize_token, split_token_name

__all__ = [
    # normalize
    "normalize_token",
    "split_token_name",
    "GLOBAL_NAMESPACE",
    "NAME_SEPARATOR",
    # tokens
    "ColorToken",
    "FOREGROUND",
    "BACKGROUND",
]
