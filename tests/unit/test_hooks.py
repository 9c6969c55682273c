"""Tests for KeyManager and the boot hooks."""

from __future__ import annotations

from unittest.mock import MagicMock

from officeconnect.hooks import FILE_DELETED, FILE_WRITTEN, Hooks
from officeconnect.keys import InMemoryKeyValueStore, KeyManager


def test_key_is_stable_until_deleted() -> None:
    keys = KeyManager(InMemoryKeyValueStore())
    first = keys.get(42)
    assert keys.get(42) == first
    assert keys.get(43) != first

    keys.delete(42)
    assert keys.get(42) != first


def test_keys_are_document_server_safe() -> None:
    key = KeyManager(InMemoryKeyValueStore()).get(1)
    assert 0 < len(key) <= 128
    assert all(c.isalnum() or c in "-_" for c in key)


def test_connect_hooks_registers_both_signals() -> None:
    context = MagicMock()
    hooks = Hooks.connect_hooks(context, KeyManager(InMemoryKeyValueStore()))

    context.connect_hook.assert_any_call(FILE_WRITTEN, hooks.file_update)
    context.connect_hook.assert_any_call(FILE_DELETED, hooks.file_delete)


def test_file_delete_forgets_key() -> None:
    store = InMemoryKeyValueStore()
    keys = KeyManager(store)
    keys.get(7)
    Hooks(keys).file_delete({"file_id": 7})
    assert store.get("document_key:7") is None


def test_hook_without_file_id_is_ignored() -> None:
    store = MagicMock()
    Hooks(KeyManager(store)).file_update({})
    store.delete.assert_not_called()


def test_hook_errors_are_logged_not_raised(caplog) -> None:
    store = MagicMock()
    store.delete.side_effect = RuntimeError("db locked")
    Hooks(KeyManager(store)).file_delete({"file_id": 9})
    assert "failed to delete key for 9" in caplog.text
