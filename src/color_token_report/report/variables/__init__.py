"""
variables.
=========

Does: Host variable records, value-shape helpers, the injected store Protocols,
      an in-memory store, and the alias resolver.
Used By: Token construction, the orchestrator, the message router, the demo CLI.
"""

from .resolver import AliasResolver
from .store import InMemoryVariableStore, clean_collection
from .types import (
    ALIAS_TYPES,
    COLOR,
    AliasValue,
    CollectionStore,
    Mode,
    RGBValue,
    ValueEntry,
    VariableCollection,
    VariablePayloadError,
    VariableRecord,
    VariableStore,
    alias_target,
    is_rgb_value,
)

__all__ = [
    # types
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
    # store
    "InMemoryVariableStore",
    "clean_collection",
    # resolver
    "AliasResolver",
]

__docformat__ = "google"
