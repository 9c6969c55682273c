"""Event listeners that hook the editor into host pages."""

from __future__ import annotations

from typing import Any, Protocol

from .core.config import Settings

LOAD_VIEWER = "viewer.load"
FILES_LOAD_ADDITIONAL_SCRIPTS = "files.load_additional_scripts"
FILES_SHARING_BEFORE_TEMPLATE_RENDERED = "files_sharing.before_template_rendered"
REGISTER_DIRECT_EDITOR = "direct_editing.register"


class PageEvent(Protocol):
    def add_script(self, app: str, name: str) -> None:
        ...

    def add_style(self, app: str, name: str) -> None:
        ...


class _AssetListener:
    """Adds the app's scripts and styles to a host page.

    Nothing is injected until a document server has been configured, since
    the scripts would only open an editor that cannot load.
    """

    scripts: tuple[str, ...] = ()
    styles: tuple[str, ...] = ()

    def __init__(self, app_name: str, settings: Settings) -> None:
        self.app_name = app_name
        self.settings = settings

    def handle(self, event: PageEvent) -> None:
        if not self.settings.document_server_configured:
            return
        for script in self.scripts:
            event.add_script(self.app_name, script)
        for style in self.styles:
            event.add_style(self.app_name, style)


class LoadViewerListener(_AssetListener):
    scripts = ("viewer", "listener")
    styles = ("viewer",)


class FilesLoadListener(_AssetListener):
    scripts = ("desktop", "main", "template")
    styles = ("main", "template")


class FilesSharingLoadListener(_AssetListener):
    scripts = ("main", "share")
    styles = ("main",)


class DirectEditorListener:
    def __init__(self, direct_editor: Any) -> None:
        self.direct_editor = direct_editor

    def handle(self, event: Any) -> None:
        event.register(self.direct_editor)
