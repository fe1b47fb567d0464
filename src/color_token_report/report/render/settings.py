"""
settings.py.

Does: Render settings for the report (title, preview sample text, swatch size,
      column widths), read from <data>/report_settings.json when available.
Returns: RenderSettings (TypedDict) merged over built-in defaults.
"""

from __future__ import annotations

import logging
from typing import Any, TypedDict

from color_token_report.report.utils.load_config import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
)

__all__ = ["RenderSettings", "DEFAULT_SETTINGS", "COLUMNS", "load_render_settings"]

logger = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = (
    "Context",
    "Token",
    "Description",
    "Background",
    "Foreground",
    "Contrast",
    "Preview",
)


class RenderSettings(TypedDict):
    title: str
    sample_text: str
    swatch_size: int
    column_widths: dict[str, int]


DEFAULT_SETTINGS: RenderSettings = {
    "title": "Colors",
    "sample_text": "Aa",
    "swatch_size": 48,
    "column_widths": {
        "Context": 120,
        "Token": 160,
        "Description": 220,
        "Background": 96,
        "Foreground": 96,
        "Contrast": 140,
        "Preview": 96,
    },
}


def _validate(raw: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if "title" in raw:
        out["title"] = str(raw["title"])
    if "sample_text" in raw:
        out["sample_text"] = str(raw["sample_text"])
    if "swatch_size" in raw:
        size = int(raw["swatch_size"])
        if size <= 0:
            raise ValueError("swatch_size must be positive")
        out["swatch_size"] = size
    if "column_widths" in raw:
        widths = raw["column_widths"]
        if not isinstance(widths, dict):
            raise ValueError("column_widths must be an object")
        unknown = set(widths) - set(COLUMNS)
        if unknown:
            raise ValueError(f"unknown columns: {sorted(unknown)}")
        out["column_widths"] = {str(k): int(v) for k, v in widths.items()}
    return out


def load_render_settings(name: str = "report_settings") -> RenderSettings:
    """Does: Merge <data>/<name>.json over the defaults; missing file → defaults.
    Malformed files propagate ConfigParseError/ConfigTypeError.
    """
    try:
        overrides = load_config(name, mode="validated_dict", validator=_validate)
    except (DataDirNotFound, ConfigFileNotFound):
        logger.debug("No %s.json found; using default render settings", name)
        overrides = {}

    widths = dict(DEFAULT_SETTINGS["column_widths"])
    widths.update(overrides.get("column_widths", {}))
    return {
        "title": overrides.get("title", DEFAULT_SETTINGS["title"]),
        "sample_text": overrides.get("sample_text", DEFAULT_SETTINGS["sample_text"]),
        "swatch_size": overrides.get("swatch_size", DEFAULT_SETTINGS["swatch_size"]),
        "column_widths": widths,
    }
