"""
color_token_report
==================

Does: Root package initializer for the color token report project.
Returns: Exposes the `report` subpackage (resolution, pairing, grading, rendering).
Used by: All higher-level imports starting from `color_token_report.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
