"""Tests for page listeners and the direct editor."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from officeconnect.core.config import Settings
from officeconnect.core.crypt import Crypt
from officeconnect.core.exceptions import DocumentServerNotConfiguredError
from officeconnect.direct_editor import MIMETYPES, DirectEditor
from officeconnect.listeners import (
    DirectEditorListener,
    FilesLoadListener,
    FilesSharingLoadListener,
    LoadViewerListener,
)
from officeconnect.testing import FakeHostBuilder


@pytest.mark.parametrize(
    ("listener_cls", "scripts", "styles"),
    [
        (LoadViewerListener, ["viewer", "listener"], ["viewer"]),
        (FilesLoadListener, ["desktop", "main", "template"], ["main", "template"]),
        (FilesSharingLoadListener, ["main", "share"], ["main"]),
    ],
)
def test_page_listeners_inject_assets(settings: Settings, listener_cls, scripts, styles) -> None:
    event = MagicMock()
    listener_cls("officeconnect", settings).handle(event)

    assert [c.args for c in event.add_script.call_args_list] == [("officeconnect", s) for s in scripts]
    assert [c.args for c in event.add_style.call_args_list] == [("officeconnect", s) for s in styles]


def test_page_listeners_wait_for_document_server() -> None:
    event = MagicMock()
    FilesLoadListener("officeconnect", Settings()).handle(event)
    event.add_script.assert_not_called()
    event.add_style.assert_not_called()


def test_direct_editor_listener_registers_editor() -> None:
    event = MagicMock()
    editor = object()
    DirectEditorListener(editor).handle(event)
    event.register.assert_called_once_with(editor)


@pytest.fixture
def editor(settings: Settings) -> DirectEditor:
    host = FakeHostBuilder().build()
    return DirectEditor("officeconnect", host.urls, host.l10n, host.log, settings, Crypt(settings))


def test_direct_editor_identity(editor: DirectEditor) -> None:
    assert editor.get_id() == "officeconnect"
    assert editor.get_name() == "Document editor"
    assert editor.get_mimetypes() == list(MIMETYPES)
    assert "application/vnd.oasis.opendocument.text" in editor.get_mimetypes_optional()
    assert editor.is_secure() is False


def test_direct_editor_name_is_localized(settings: Settings) -> None:
    host = FakeHostBuilder().build()
    editor = DirectEditor("officeconnect", host.urls, host.l10n, host.log, settings, Crypt(settings), "de")
    assert editor.get_name() == "Dokumenteditor"


def test_direct_editor_open_signs_token(editor: DirectEditor, settings: Settings) -> None:
    link = editor.open(42, "alice")

    assert link.startswith("https://cloud.example.com/apps/officeconnect/42?directToken=")
    token = link.split("directToken=", 1)[1]
    payload, error = Crypt(settings).read_hash(token)
    assert error is None
    assert payload == {"action": "direct", "fileId": 42, "userId": "alice"}


def test_direct_editor_open_requires_document_server() -> None:
    settings = Settings()
    host = FakeHostBuilder().build()
    editor = DirectEditor("officeconnect", host.urls, host.l10n, host.log, settings, Crypt(settings))
    with pytest.raises(DocumentServerNotConfiguredError, match="not configured") as exc_info:
        editor.open(1, "alice")
    assert exc_info.value.error_code == "DOCUMENT_SERVER_NOT_CONFIGURED"
    assert exc_info.value.kind is None
