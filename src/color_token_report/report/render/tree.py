"""
tree.py
=======

Does: Turn a graded report into a declarative render tree (plain dicts) that a
      host canvas layer can walk: frames with layout hints, text nodes, and
      color swatches. No drawing API is touched here.
Returns: build_render_tree(report, settings) -> root frame dict.
Used By: The host message router ("generate-doc") and the demo CLI (--format tree).

Node shapes:
  {"type": "frame",  "name", "layout": {...}, "children": [...]}
  {"type": "text",   "name", "characters", "font_size", "font_style"[, "color"]}
  {"type": "swatch", "name", "fill": "#rrggbb"|None, "size", "label", "children": [...]}
"""

from __future__ import annotations

from typing import Any

from color_token_report.report.color import format_grade
from color_token_report.report.orchestrator import Report, ReportEntry
from color_token_report.report.token import ColorToken

from .settings import COLUMNS, RenderSettings, load_render_settings

__all__ = ["Node", "build_render_tree", "frame", "text", "swatch", "row_cells"]

Node = dict[str, Any]

ROOT_WIDTH = 1024
_SEMI_BOLD = "Semi Bold"
_REGULAR = "Regular"


def _layout(direction: str, padding: int = 0, spacing: int = 0, **extra: Any) -> dict[str, Any]:
    return {"direction": direction, "padding": padding, "spacing": spacing, **extra}


def frame(name: str, layout: dict[str, Any], children: list[Node] | None = None) -> Node:
    return {"type": "frame", "name": name, "layout": layout, "children": children or []}


def text(
    name: str,
    characters: str,
    *,
    font_size: int = 14,
    font_style: str = _REGULAR,
    color: str | None = None,
    width: int | None = None,
) -> Node:
    node: Node = {
        "type": "text",
        "name": name,
        "characters": characters,
        "font_size": font_size,
        "font_style": font_style,
    }
    if color is not None:
        node["color"] = color
    if width is not None:
        node["width"] = width
    return node


def swatch(
    name: str,
    token: ColorToken | None,
    size: int,
    children: list[Node] | None = None,
) -> Node:
    return {
        "type": "swatch",
        "name": name,
        "fill": token.hex if token is not None else None,
        "size": size,
        "label": token.hex if token is not None else "-",
        "children": children or [],
    }


def _description(entry: ReportEntry) -> str:
    pair = entry["pair"]
    for token in (pair.background, pair.foreground):
        if token is not None and token.description:
            return token.description
    return ""


def row_cells(namespace: str, base: str, entry: ReportEntry) -> dict[str, str]:
    """Does: Text content of one report row, keyed by column label."""
    pair = entry["pair"]
    return {
        "Context": namespace,
        "Token": base,
        "Description": _description(entry),
        "Background": pair.background.hex if pair.background else "-",
        "Foreground": pair.foreground.hex if pair.foreground else "-",
        "Contrast": format_grade(entry["grade"]),
        "Preview": "",
    }


def _row(namespace: str, base: str, entry: ReportEntry, settings: RenderSettings) -> Node:
    pair = entry["pair"]
    widths = settings["column_widths"]
    size = settings["swatch_size"]
    cells = row_cells(namespace, base, entry)

    preview_children: list[Node] = []
    if pair.foreground is not None:
        preview_children.append(
            text(
                "Sample",
                settings["sample_text"],
                font_size=16,
                font_style=_SEMI_BOLD,
                color=pair.foreground.hex,
            )
        )

    children: list[Node] = [
        text("Context", cells["Context"], width=widths["Context"]),
        text("Token", cells["Token"], font_style=_SEMI_BOLD, width=widths["Token"]),
        text("Description", cells["Description"], width=widths["Description"]),
        swatch("Background", pair.background, size),
        swatch("Foreground", pair.foreground, size),
        text("Contrast", cells["Contrast"], width=widths["Contrast"]),
        swatch("Preview", pair.background, size, preview_children),
    ]
    return frame(f"Row {namespace}/{base}", _layout("horizontal", spacing=16), children)


def build_render_tree(report: Report, settings: RenderSettings | None = None) -> Node:
    """
    Does: Build the "Color System" frame: header title, a column header row,
          then one section per namespace with one row per pair.
    """
    if settings is None:
        settings = load_render_settings()
    widths = settings["column_widths"]

    header = frame(
        "Header",
        _layout("vertical", padding=64, spacing=22),
        [text("Title", settings["title"], font_size=48, font_style=_SEMI_BOLD)],
    )
    header_row = frame(
        "Header Row",
        _layout("horizontal", spacing=16),
        [
            text(label, label, font_style=_SEMI_BOLD, width=widths[label])
            for label in COLUMNS
        ],
    )

    sections: list[Node] = []
    for namespace, entries in report.items():
        rows = [_row(namespace, base, entry, settings) for base, entry in entries.items()]
        sections.append(
            frame(
                f"Section {namespace}",
                _layout("vertical", spacing=8),
                [text("Namespace", namespace, font_size=24, font_style=_SEMI_BOLD), *rows],
            )
        )

    content = frame("Content", _layout("vertical", padding=64, spacing=22), [header_row, *sections])
    return frame(
        "Color System",
        _layout("vertical", padding=10, spacing=10, width=ROOT_WIDTH),
        [header, content],
    )
