"""
table.py.

Does: Fixed-width plain-text rendering of a graded report (one line per pair).
Used by: The demo CLI (--format table).
"""

from __future__ import annotations

from color_token_report.report.orchestrator import Report, iter_rows

from .settings import COLUMNS
from .tree import row_cells

__all__ = ["TABLE_COLUMNS", "render_text_table"]

# Preview is a visual-only column
TABLE_COLUMNS: tuple[str, ...] = tuple(c for c in COLUMNS if c != "Preview")


def render_text_table(report: Report) -> str:
    rows = [row_cells(ns, base, entry) for ns, base, entry in iter_rows(report)]
    widths = {
        col: max([len(col), *(len(r[col]) for r in rows)]) for col in TABLE_COLUMNS
    }

    def _line(values: dict[str, str]) -> str:
        return "  ".join(values[c].ljust(widths[c]) for c in TABLE_COLUMNS).rstrip()

    lines = [_line({c: c for c in TABLE_COLUMNS})]
    lines.append("  ".join("-" * widths[c] for c in TABLE_COLUMNS))
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines)
