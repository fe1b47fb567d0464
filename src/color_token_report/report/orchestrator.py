# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level orchestration of a report request:
      store → resolve every variable of a collection at a mode → ColorTokens
      → namespace/pair grouping → WCAG grade per pair.
Returns:
  - resolve_tokens_for_collection(store, collection_id, mode_id) -> list[ColorToken]
  - build_report(tokens) -> {namespace: {base_name: {"pair": ColorPair, "grade": ContrastResult|None}}}
  - generate_report(store, collection_id, mode_id) -> (tokens, report)
Used by: The host message router and the demo CLI.
"""

import logging
from collections.abc import Iterable
from typing import TypedDict

from color_token_report.report.color import ContrastResult, grade
from color_token_report.report.pairing import (
    ColorPair,
    PairingCollision,
    group_by_namespace,
    group_by_pair,
)
from color_token_report.report.token import ColorToken
from color_token_report.report.utils.log import debug
from color_token_report.report.variables import AliasResolver, VariableStore

logger = logging.getLogger(__name__)

__all__ = [
    "ReportEntry",
    "Report",
    "resolve_tokens_for_collection",
    "build_report",
    "generate_report",
    "iter_rows",
]


class ReportEntry(TypedDict):
    pair: ColorPair
    grade: ContrastResult | None


Report = dict[str, dict[str, ReportEntry]]


async def resolve_tokens_for_collection(
    store: VariableStore,
    collection_id: str,
    mode_id: str,
) -> list[ColorToken]:
    """
    Does: Resolve every variable of `collection_id` at `mode_id`, in store order.
          Unresolvable and non-COLOR variables are dropped silently.
    """
    try:
        variables = await store.list_variables(collection_id)
    except Exception:
        logger.warning("Listing variables failed for collection %r", collection_id, exc_info=True)
        return []

    resolver = AliasResolver(store)
    tokens: list[ColorToken] = []
    for variable in variables:
        token = await ColorToken.from_variable(variable, mode_id, resolver)
        if token is not None:
            tokens.append(token)

    dropped = len(variables) - len(tokens)
    debug(
        f"collection {collection_id!r} @ {mode_id!r}: {len(tokens)} tokens, {dropped} dropped",
        topic="report",
    )
    return tokens


def build_report(
    tokens: Iterable[ColorToken],
    diagnostics: list[PairingCollision] | None = None,
) -> Report:
    """Does: Group, pair and grade `tokens`; ordering follows first encounter."""
    paired = group_by_pair(group_by_namespace(tokens), diagnostics=diagnostics)
    report: Report = {}
    for namespace, pairs in paired.items():
        report[namespace] = {
            base: {"pair": pair, "grade": grade(pair)} for base, pair in pairs.items()
        }
    return report


async def generate_report(
    store: VariableStore,
    collection_id: str,
    mode_id: str,
    diagnostics: list[PairingCollision] | None = None,
) -> tuple[list[ColorToken], Report]:
    tokens = await resolve_tokens_for_collection(store, collection_id, mode_id)
    return tokens, build_report(tokens, diagnostics=diagnostics)


def iter_rows(report: Report) -> Iterable[tuple[str, str, ReportEntry]]:
    """Does: Flatten a report into (namespace, base_name, entry) in report order."""
    for namespace, entries in report.items():
        for base, entry in entries.items():
            yield namespace, base, entry
