"""
resolver.py
===========

Does: Resolve a variable at a mode to its concrete RGB entry, following alias
      chains across variables (and across mode sets) with a visited-id guard.
Returns: The direct RGB mapping as stored by the host, or None when the chain
         has no value for the mode, points at a missing variable, loops, or
         ends in an unrecognized value shape.
Used By: ColorToken.from_variable and the batch resolution in orchestrator.

Never raises for data problems; absence is always None.
"""

from __future__ import annotations

import logging

from color_token_report.report.utils.log import debug

from .types import COLOR, RGBValue, VariableRecord, VariableStore, alias_target, is_rgb_value

__all__ = ["AliasResolver"]

logger = logging.getLogger(__name__)


class AliasResolver:
    """Alias chain walker bound to one variable store."""

    def __init__(self, store: VariableStore) -> None:
        self.store = store

    async def _lookup(self, variable_id: str) -> VariableRecord | None:
        try:
            return await self.store.get_variable_by_id(variable_id)
        except Exception:
            logger.warning("Variable lookup failed for %r", variable_id, exc_info=True)
            return None

    async def resolve(
        self,
        variable: VariableRecord,
        mode_id: str,
        visited: set[str] | None = None,
    ) -> RGBValue | None:
        """
        Does: Walk `variable` at `mode_id` until a direct color is found.

        Alias hops keep `mode_id` when the target defines it, otherwise fall back
        to the target's first mode (insertion order). `visited` is shared across
        hops and mutated in place, so callers can pass one in to extend a walk.
        """
        if visited is None:
            visited = set()

        current, mode = variable, mode_id
        while True:
            if mode not in current.values_by_mode:
                debug(f"{current.name!r}: no value for mode {mode!r}", topic="resolve")
                return None
            if current.id in visited:
                logger.debug("Alias cycle at %r (%s)", current.id, current.name)
                return None
            visited.add(current.id)

            value = current.values_by_mode[mode]
            if current.resolved_type == COLOR and is_rgb_value(value):
                return value  # type: ignore[return-value]

            target_id = alias_target(value)
            if target_id is None:
                debug(f"{current.name!r}: unrecognized value {value!r}", topic="resolve")
                return None

            target = await self._lookup(target_id)
            if target is None:
                logger.debug("Broken alias %r -> %r", current.id, target_id)
                return None

            if mode not in target.values_by_mode:
                if not target.values_by_mode:
                    return None
                fallback = next(iter(target.values_by_mode))
                debug(
                    f"{target.name!r} lacks mode {mode!r}; falling back to {fallback!r}",
                    topic="resolve",
                )
                mode = fallback
            current = target
