# report/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for token-name normalization and splitting
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Deterministic token-name normalization (trim, lowercase, collapse
      whitespace runs) and the two-level `namespace/token` name split.
Returns: normalize_token(), split_token_name().
Used by: ColorToken naming facts and pairing.
"""

from __future__ import annotations

import re

__all__ = [
    "GLOBAL_NAMESPACE",
    "NAME_SEPARATOR",
    "normalize_token",
    "split_token_name",
]

GLOBAL_NAMESPACE = "global"
NAME_SEPARATOR = "/"

_WS_RE = re.compile(r"\s+")


def normalize_token(token: str) -> str:
    """
    Does: Normalize `token`: trim, lowercase, collapse internal whitespace to one space.
    Returns: Normalized token ("" for non-strings).
    """
    if not isinstance(token, str):
        return ""
    return _WS_RE.sub(" ", token.strip().lower())


def split_token_name(name: str) -> tuple[str | None, str]:
    """
    Does: Split a full variable name into (namespace segment, raw token name).
          Only `namespace/token` is recognized: deeper paths keep segment 1.
    Returns: (None, name) when there is no separator.
    """
    if NAME_SEPARATOR not in name:
        return None, name
    parts = name.split(NAME_SEPARATOR)
    return parts[0], parts[1]
