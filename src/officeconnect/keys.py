"""Document keys identifying a file revision to the document server."""

from __future__ import annotations

import logging
import secrets

from .host.services import KeyValueStore

logger = logging.getLogger(__name__)


class KeyManager:
    """Creates, remembers and forgets per-file document keys.

    A key stays stable until the file changes; the boot hooks delete it on
    every write or delete so the next editing session gets a fresh one.
    """

    PREFIX = "document_key:"

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def _name(self, file_id: int | str) -> str:
        return f"{self.PREFIX}{file_id}"

    def get(self, file_id: int | str) -> str:
        """Return the key for *file_id*, creating one on first use."""
        key = self.store.get(self._name(file_id))
        if key:
            return key
        key = secrets.token_urlsafe(15)
        self.store.set(self._name(file_id), key)
        logger.debug("Created document key", extra={"file_id": file_id})
        return key

    def delete(self, file_id: int | str) -> None:
        self.store.delete(self._name(file_id))


class InMemoryKeyValueStore:
    """KeyValueStore kept in process memory, for hosts without plugin storage."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
