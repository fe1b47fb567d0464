"""
color.
=====

Does: Aggregate color math (sRGB, luminance, contrast) and WCAG grading.
Used By: Token construction, report building, rendering.
Returns: Pure values and functions; no side effects.
"""

from .color import Color, clamp_channel, to_linear
from .contrast import (
    ContrastResult,
    Grade,
    format_grade,
    grade,
    grade_colors,
    grade_large_text,
    grade_normal_text,
)

__all__ = [
    # color
    "Color",
    "clamp_channel",
    "to_linear",
    # contrast
    "ContrastResult",
    "Grade",
    "grade",
    "grade_colors",
    "grade_normal_text",
    "grade_large_text",
    "format_grade",
]

__docformat__ = "google"
