"""
color_token.py
==============

Does: Wrap a resolved Color with the variable's identity, name and description,
      and derive naming-convention facts from the name:
        - is_foreground: 'foreground', 'foreground <x>', '<x> foreground'
        - base_name: the background counterpart used as the pairing key
        - namespace: first '/' segment, or 'global'
Returns: ColorToken instances (immutable) or None from the factory.
Used By: Pairing, grading and rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from color_token_report.report.color import Color
from color_token_report.report.utils.log import debug
from color_token_report.report.variables import COLOR, AliasResolver, VariableRecord

from .normalize import GLOBAL_NAMESPACE, normalize_token, split_token_name

__all__ = ["ColorToken", "FOREGROUND", "BACKGROUND"]

logger = logging.getLogger(__name__)

FOREGROUND = "foreground"
BACKGROUND = "background"
_FG_PREFIX = FOREGROUND + " "
_FG_SUFFIX = " " + FOREGROUND


def _background_counterpart(raw: str) -> str:
    """Map a normalized raw token name to its background-side name."""
    if raw == FOREGROUND:
        return BACKGROUND
    if raw.startswith(_FG_PREFIX):
        return BACKGROUND + raw[len(FOREGROUND):]
    if raw.endswith(_FG_SUFFIX):
        return raw[: -len(_FG_SUFFIX)]
    return raw


@dataclass(frozen=True)
class ColorToken:
    id: str
    name: str
    color: Color
    description: str = ""

    @classmethod
    async def from_variable(
        cls,
        variable: VariableRecord,
        mode_id: str,
        resolver: AliasResolver,
    ) -> ColorToken | None:
        """
        Does: Resolve `variable` at `mode_id` and wrap it.
        Returns: None for non-COLOR variables or when resolution yields nothing.
        """
        if variable.resolved_type != COLOR:
            debug(f"skip {variable.name!r}: type {variable.resolved_type}", topic="resolve")
            return None
        value = await resolver.resolve(variable, mode_id)
        if value is None:
            logger.debug("Dropping %r: unresolvable at mode %r", variable.name, mode_id)
            return None
        return cls(
            id=variable.id,
            name=variable.name,
            color=Color.from_value(value),
            description=variable.description,
        )

    # ── naming convention ────────────────────────────────────────────────
    @property
    def raw_token_name(self) -> str:
        return split_token_name(self.name)[1]

    @property
    def token_name(self) -> str:
        """Normalized raw token name."""
        return normalize_token(self.raw_token_name)

    @property
    def namespace(self) -> str:
        segment = split_token_name(self.name)[0]
        if segment is None:
            return GLOBAL_NAMESPACE
        return normalize_token(segment)

    @property
    def is_foreground(self) -> bool:
        raw = self.token_name
        return raw == FOREGROUND or raw.startswith(_FG_PREFIX) or raw.endswith(_FG_SUFFIX)

    @property
    def base_name(self) -> str:
        """
        Pairing key. A bare 'foreground'/'background' in a named namespace keys
        under the namespace itself ("Primary/Foreground" -> "primary"); in the
        global namespace it stays "background" so "Background" and
        "Global/Foreground" pair.

        A token literally named after its namespace ("Primary/Primary") shares
        that key with "Primary/Background"; the later one wins the background
        side and group_by_pair reports the overwrite in its diagnostics.
        """
        base = _background_counterpart(self.token_name)
        if base == BACKGROUND and self.namespace != GLOBAL_NAMESPACE:
            return self.namespace
        return base

    @property
    def hex(self) -> str:
        return self.color.hex
