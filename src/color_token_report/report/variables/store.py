"""
store.py
========

Does: In-memory variable/collection store built from a host export (JSON-shaped
      dicts). Satisfies both `VariableStore` and `CollectionStore`.
Used By: The demo CLI, the message router in tests, and any caller that already
         holds a snapshot of the host's variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .types import Mode, VariableCollection, VariablePayloadError, VariableRecord

__all__ = ["InMemoryVariableStore", "clean_collection"]

logger = logging.getLogger(__name__)


def _clean_mode(raw: Mapping[str, Any]) -> Mode:
    mode_id = raw.get("modeId", raw.get("id"))
    if not isinstance(mode_id, str) or not mode_id:
        raise VariablePayloadError(f"mode without an id: {raw!r}")
    return {"id": mode_id, "name": str(raw.get("name") or "")}


def clean_collection(raw: Mapping[str, Any]) -> VariableCollection:
    """Does: Normalize a host collection to {id, name, modes[{id, name}]}.
    Missing name → "", missing modes → [].
    """
    coll_id = raw.get("id")
    if not isinstance(coll_id, str) or not coll_id:
        raise VariablePayloadError(f"collection without an id: {raw!r}")
    return {
        "id": coll_id,
        "name": str(raw.get("name") or ""),
        "modes": [_clean_mode(m) for m in raw.get("modes") or []],
    }


class InMemoryVariableStore:
    """Variables and collections held in dicts, in the order they were given."""

    def __init__(
        self,
        variables: Iterable[VariableRecord] = (),
        collections: Iterable[VariableCollection] = (),
    ) -> None:
        self._variables: dict[str, VariableRecord] = {}
        for var in variables:
            if var.id in self._variables:
                logger.warning("Duplicate variable id %r; keeping the last one", var.id)
            self._variables[var.id] = var
        self._collections: list[VariableCollection] = list(collections)

    @classmethod
    def from_export(cls, payload: Mapping[str, Any]) -> InMemoryVariableStore:
        """Does: Build a store from {'collections': [...], 'variables': [...]}."""
        if not isinstance(payload, Mapping):
            raise VariablePayloadError(
                f"export must be an object, got {type(payload).__name__}"
            )
        collections = [clean_collection(c) for c in payload.get("collections") or []]
        variables = [VariableRecord.from_payload(v) for v in payload.get("variables") or []]
        logger.debug(
            "Loaded export: %d collections, %d variables", len(collections), len(variables)
        )
        return cls(variables, collections)

    def __len__(self) -> int:
        return len(self._variables)

    async def get_variable_by_id(self, variable_id: str) -> VariableRecord | None:
        return self._variables.get(variable_id)

    async def list_variables(self, collection_id: str) -> list[VariableRecord]:
        return [v for v in self._variables.values() if v.collection_id == collection_id]

    async def list_collections(self) -> list[VariableCollection]:
        return [
            {"id": c["id"], "name": c["name"], "modes": list(c["modes"])}
            for c in self._collections
        ]
