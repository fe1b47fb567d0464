"""
color.py
========

Does: Immutable RGB color (channels as floats in [0, 1]) with hex formatting,
      sRGB linearization, WCAG relative luminance and contrast ratio.
Used By: ColorToken, the contrast grader and the render layer (swatch fills).
Returns: `Color` values; floats for luminance/contrast; lowercase '#rrggbb' strings.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import webcolors

__all__ = [
    "Color",
    "clamp_channel",
    "to_linear",
]
__docformat__ = "google"

# sRGB transfer function breakpoint as written in WCAG 2.x
_LINEAR_THRESHOLD = 0.03928
# Rec. 709 luminance coefficients
_LUMA_R, _LUMA_G, _LUMA_B = 0.2126, 0.7152, 0.0722


def clamp_channel(value: float) -> float:
    """Does: Clamp a channel into [0, 1]; NaN collapses to 0."""
    v = float(value)
    if math.isnan(v):
        return 0.0
    return min(1.0, max(0.0, v))


def to_linear(channel: float) -> float:
    """Does: Convert a gamma-encoded sRGB channel (0-1) to linear light."""
    if channel <= _LINEAR_THRESHOLD:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _to_byte(channel: float) -> int:
    # round half up, as hosts format colors
    return int(math.floor(channel * 255 + 0.5))


@dataclass(frozen=True)
class Color:
    """An sRGB color. Out-of-range channels are clamped, never rejected."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", clamp_channel(self.r))
        object.__setattr__(self, "g", clamp_channel(self.g))
        object.__setattr__(self, "b", clamp_channel(self.b))

    # ── constructors ─────────────────────────────────────────────────────
    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Does: Parse '#rgb' / '#rrggbb' (case-insensitive) into a Color."""
        rgb = webcolors.hex_to_rgb(value)
        return cls(rgb.red / 255.0, rgb.green / 255.0, rgb.blue / 255.0)

    @classmethod
    def from_value(cls, value: Mapping[str, Any]) -> Color:
        """Does: Build from a host RGB(A) mapping {'r','g','b'[, 'a']}; alpha is ignored."""
        return cls(value["r"], value["g"], value["b"])

    # ── derived values ───────────────────────────────────────────────────
    def to_bytes(self) -> tuple[int, int, int]:
        return _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)

    def to_hex(self) -> str:
        """Does: Format as lowercase '#rrggbb' (each channel rounded to 0-255)."""
        return webcolors.rgb_to_hex(self.to_bytes())

    @property
    def hex(self) -> str:
        return self.to_hex()

    def luminance(self) -> float:
        """Does: WCAG relative luminance of this color."""
        return (
            _LUMA_R * to_linear(self.r)
            + _LUMA_G * to_linear(self.g)
            + _LUMA_B * to_linear(self.b)
        )

    def contrast_ratio(self, other: Color) -> float:
        """Does: WCAG contrast ratio with `other`; symmetric, in [1, 21]."""
        l1 = self.luminance()
        l2 = other.luminance()
        lighter = max(l1, l2)
        darker = min(l1, l2)
        return (lighter + 0.05) / (darker + 0.05)

    def __str__(self) -> str:
        return self.to_hex()
