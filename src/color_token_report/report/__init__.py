# color_token_report/report/__init__.py
"""
report.
======

Does: Token resolution, pairing, contrast grading and report rendering.
      Subpackages: color, variables, token, pairing, render, utils.
Used by: The demo CLI, the host message router, and library callers.
"""

__all__: list[str] = []
__docformat__ = "google"
