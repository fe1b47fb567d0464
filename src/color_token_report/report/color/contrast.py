"""
contrast.py
===========

Does: Grade a background/foreground pair against the WCAG 2.x text contrast
      thresholds (normal and large text).
Returns: `ContrastResult` {ratio, normal_text, large_text} or None for unpaired tokens.
Used by: orchestrator.build_report and the render layer (contrast cell text).
"""

from __future__ import annotations

from typing import Literal, Protocol, TypedDict

from .color import Color

__all__ = [
    "Grade",
    "ContrastResult",
    "grade",
    "grade_colors",
    "grade_normal_text",
    "grade_large_text",
    "format_grade",
]


Grade = Literal["AAA", "AA", "FAIL"]

# WCAG 2.x, literal values
NORMAL_TEXT_AAA = 7.0
NORMAL_TEXT_AA = 4.5
LARGE_TEXT_AAA = 4.5
LARGE_TEXT_AA = 3.0


class ContrastResult(TypedDict):
    ratio: float
    normal_text: Grade
    large_text: Grade


class _HasColor(Protocol):
    color: Color


class _PairLike(Protocol):
    @property
    def background(self) -> _HasColor | None: ...

    @property
    def foreground(self) -> _HasColor | None: ...


def grade_normal_text(ratio: float) -> Grade:
    if ratio >= NORMAL_TEXT_AAA:
        return "AAA"
    if ratio >= NORMAL_TEXT_AA:
        return "AA"
    return "FAIL"


def grade_large_text(ratio: float) -> Grade:
    if ratio >= LARGE_TEXT_AAA:
        return "AAA"
    if ratio >= LARGE_TEXT_AA:
        return "AA"
    return "FAIL"


def grade_colors(background: Color, foreground: Color) -> ContrastResult:
    """Does: Grade two concrete colors (ratio is computed background → foreground)."""
    ratio = background.contrast_ratio(foreground)
    return {
        "ratio": ratio,
        "normal_text": grade_normal_text(ratio),
        "large_text": grade_large_text(ratio),
    }


def grade(pair: _PairLike) -> ContrastResult | None:
    """
    Does: Grade a ColorPair. Either side missing → None (rendered as '-').
    """
    if pair.background is None or pair.foreground is None:
        return None
    return grade_colors(pair.background.color, pair.foreground.color)


def format_grade(result: ContrastResult | None) -> str:
    """Does: Short cell text like '4.54:1 AA/AAA', or '-' when ungraded."""
    if result is None:
        return "-"
    return f"{result['ratio']:.2f}:1 {result['normal_text']}/{result['large_text']}"
