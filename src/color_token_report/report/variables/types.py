# color_token_report/report/variables/types.py
"""
types.py.

Does: Define variable records as delivered by the host (read-only), their
      per-mode value shapes, and the structural store Protocols the core is
      injected with.
Used by: resolver, store, token factory, orchestrator, message router.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypedDict, runtime_checkable

__all__ = [
    "COLOR",
    "ALIAS_TYPES",
    "RGBValue",
    "AliasValue",
    "ValueEntry",
    "Mode",
    "VariableCollection",
    "VariableRecord",
    "VariablePayloadError",
    "VariableStore",
    "CollectionStore",
    "is_rgb_value",
    "alias_target",
]
__docformat__ = "google"

COLOR = "COLOR"
# Hosts have shipped both spellings for alias entries.
ALIAS_TYPES = frozenset({"VARIABLE_ALIAS", "VARIABLE_REFERENCE"})


class VariablePayloadError(ValueError):
    """Raise when a host payload can't be turned into a record."""


class RGBValue(TypedDict, total=False):
    r: float
    g: float
    b: float
    a: float


class AliasValue(TypedDict):
    type: str
    id: str


ValueEntry = Mapping[str, Any]


class Mode(TypedDict):
    id: str
    name: str


class VariableCollection(TypedDict):
    id: str
    name: str
    modes: list[Mode]


def _is_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def is_rgb_value(value: object) -> bool:
    """Does: True for a direct {'r','g','b'} entry with numeric channels."""
    if not isinstance(value, Mapping):
        return False
    return all(_is_number(value.get(k)) for k in ("r", "g", "b"))


def alias_target(value: object) -> str | None:
    """Does: Return the referenced variable id of an alias entry, else None."""
    if not isinstance(value, Mapping):
        return None
    if value.get("type") not in ALIAS_TYPES:
        return None
    target = value.get("id")
    return target if isinstance(target, str) and target else None


@dataclass(frozen=True)
class VariableRecord:
    """A host variable. `values_by_mode` keeps the host's insertion order."""

    id: str
    name: str
    resolved_type: str
    values_by_mode: Mapping[str, ValueEntry] = field(default_factory=dict)
    description: str = ""
    collection_id: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> VariableRecord:
        """Does: Build a record from a host-shaped (camelCase) mapping."""
        var_id = payload.get("id")
        name = payload.get("name")
        if not isinstance(var_id, str) or not var_id:
            raise VariablePayloadError(f"variable without a usable 'id': {payload!r}")
        if not isinstance(name, str):
            raise VariablePayloadError(f"variable {var_id!r} has no 'name'")
        values = payload.get("valuesByMode") or {}
        if not isinstance(values, Mapping):
            raise VariablePayloadError(f"variable {var_id!r}: 'valuesByMode' must be an object")
        return cls(
            id=var_id,
            name=name,
            resolved_type=str(payload.get("resolvedType", "")),
            values_by_mode=dict(values),
            description=str(payload.get("description") or ""),
            collection_id=payload.get("variableCollectionId"),
        )


@runtime_checkable
class VariableStore(Protocol):
    """Lookup surface the resolver and batch functions are injected with."""

    async def get_variable_by_id(self, variable_id: str) -> VariableRecord | None: ...
    async def list_variables(self, collection_id: str) -> list[VariableRecord]: ...


@runtime_checkable
class CollectionStore(Protocol):
    async def list_collections(self) -> list[VariableCollection]: ...
