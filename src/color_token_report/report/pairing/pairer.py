"""
pairer.py
=========

Does: Group ColorTokens by namespace, then pair each namespace's tokens into
      background/foreground ColorPairs keyed by base name.
Returns: Ordered dicts (first-encounter order for namespaces and base names).
Used By: orchestrator.build_report.

Two tokens claiming the same side of the same base name: the later one wins.
Pass a `diagnostics` list to collect those overwrites.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

from color_token_report.report.token import ColorToken
from color_token_report.report.utils.log import debug

__all__ = [
    "ColorPair",
    "PairingCollision",
    "Side",
    "group_by_namespace",
    "group_by_pair",
]

logger = logging.getLogger(__name__)

Side = Literal["background", "foreground"]


@dataclass
class ColorPair:
    """A view over existing tokens; either side may be missing."""

    background: ColorToken | None = None
    foreground: ColorToken | None = None

    @property
    def complete(self) -> bool:
        return self.background is not None and self.foreground is not None

    def tokens(self) -> list[ColorToken]:
        return [t for t in (self.background, self.foreground) if t is not None]


@dataclass(frozen=True)
class PairingCollision:
    namespace: str
    base_name: str
    side: Side
    replaced: ColorToken
    replacement: ColorToken


def group_by_namespace(tokens: Iterable[ColorToken]) -> dict[str, list[ColorToken]]:
    groups: dict[str, list[ColorToken]] = {}
    for token in tokens:
        groups.setdefault(token.namespace, []).append(token)
    return groups


def group_by_pair(
    groups: Mapping[str, Sequence[ColorToken]],
    diagnostics: list[PairingCollision] | None = None,
) -> dict[str, dict[str, ColorPair]]:
    """
    Does: Build namespace → base name → ColorPair.
          Foreground-style names fill `.foreground`, everything else `.background`.
    """
    paired: dict[str, dict[str, ColorPair]] = {}
    for namespace, tokens in groups.items():
        pairs = paired.setdefault(namespace, {})
        for token in tokens:
            base = token.base_name
            pair = pairs.setdefault(base, ColorPair())
            side: Side = "foreground" if token.is_foreground else "background"
            previous = getattr(pair, side)
            if previous is not None and previous is not token:
                logger.debug(
                    "%s/%s: %s %r replaces %r", namespace, base, side, token.name, previous.name
                )
                if diagnostics is not None:
                    diagnostics.append(
                        PairingCollision(namespace, base, side, previous, token)
                    )
            setattr(pair, side, token)
        debug(f"{namespace}: {len(pairs)} pairs from {len(tokens)} tokens", topic="pairing")
    return paired
