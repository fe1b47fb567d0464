"""
render.
======

Does: Declarative render tree and plain-text table for graded reports, plus
      the render settings they read.
"""

from .settings import COLUMNS, DEFAULT_SETTINGS, RenderSettings, load_render_settings
from .table import TABLE_COLUMNS, render_text_table
from .tree import Node, build_render_tree, row_cells

__all__ = [
    "COLUMNS",
    "DEFAULT_SETTINGS",
    "RenderSettings",
    "load_render_settings",
    "TABLE_COLUMNS",
    "render_text_table",
    "Node",
    "build_render_tree",
    "row_cells",
]

__docformat__ = "google"
