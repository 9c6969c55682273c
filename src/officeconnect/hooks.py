"""Host file hooks connected at boot."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from .keys import KeyManager

logger = logging.getLogger(__name__)

FILE_WRITTEN = "file.written"
FILE_DELETED = "file.deleted"


class BootContext(Protocol):
    def connect_hook(self, signal: str, handler: Any) -> None:
        ...


class Hooks:
    """Keeps document keys in step with file changes made outside the editor.

    Handlers run inside the host's file operations. A failed key deletion is
    logged and does not raise into the host.
    """

    def __init__(self, key_manager: KeyManager) -> None:
        self.key_manager = key_manager

    @classmethod
    def connect_hooks(cls, context: BootContext, key_manager: KeyManager) -> "Hooks":
        hooks = cls(key_manager)
        context.connect_hook(FILE_WRITTEN, hooks.file_update)
        context.connect_hook(FILE_DELETED, hooks.file_delete)
        return hooks

    def _forget_key(self, params: dict[str, Any], reason: str) -> None:
        file_id = params.get("file_id")
        if file_id is None:
            return
        try:
            self.key_manager.delete(file_id)
        except Exception:
            logger.exception("Hook %s: failed to delete key for %s", reason, file_id, extra={"file_id": file_id})
            return
        logger.debug("Hook %s: key deleted for %s", reason, file_id)

    def file_update(self, params: dict[str, Any]) -> None:
        self._forget_key(params, "file_update")

    def file_delete(self, params: dict[str, Any]) -> None:
        self._forget_key(params, "file_delete")
