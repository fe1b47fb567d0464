"""
messages.py
===========

Does: Route host UI messages to report operations, one request at a time.
      - "ui-ready"     → list collections (id, name, modes)
      - "generate-doc" → resolve, pair, grade, build the render tree
      - "cancel"       → close; later messages are ignored
Returns: A list of reply messages (dicts) per inbound message.
Used By: Host adapters that own the actual UI channel.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from color_token_report.report.orchestrator import generate_report
from color_token_report.report.render import RenderSettings, build_render_tree
from color_token_report.report.utils.log import debug
from color_token_report.report.variables import CollectionStore, VariableStore

__all__ = ["MessageRouter", "NOTIFY_DONE"]

logger = logging.getLogger(__name__)

Message = dict[str, Any]

NOTIFY_DONE = "Document generated"


class MessageRouter:
    def __init__(self, store: VariableStore, settings: RenderSettings | None = None) -> None:
        if not isinstance(store, VariableStore):
            raise TypeError(f"store must implement VariableStore, got {type(store).__name__}")
        self.store = store
        self.settings = settings
        self.closed = False

    async def handle(self, message: Mapping[str, Any]) -> list[Message]:
        if self.closed:
            debug(f"ignored after close: {message.get('type')!r}", topic="messages")
            return []

        kind = message.get("type")
        debug(f"inbound {kind!r}", topic="messages")
        if kind == "ui-ready":
            return [await self._collections()]
        if kind == "generate-doc":
            return await self._generate(message)
        if kind == "cancel":
            self.closed = True
            return [{"type": "close"}]

        logger.debug("Unknown message type %r", kind)
        return []

    async def _collections(self) -> Message:
        collections: list[Any] = []
        if isinstance(self.store, CollectionStore):
            collections = await self.store.list_collections()
        return {"type": "collections", "collections": collections}

    async def _generate(self, message: Mapping[str, Any]) -> list[Message]:
        collection_id = message.get("collectionId")
        mode_id = message.get("modeId")
        if not collection_id or not mode_id:
            return [{"type": "error", "message": "collectionId and modeId are required"}]

        tokens, report = await generate_report(self.store, collection_id, mode_id)
        tree = build_render_tree(report, self.settings)
        return [
            {"type": "report", "tree": tree, "tokenCount": len(tokens)},
            {"type": "notify", "message": NOTIFY_DONE},
        ]
