"""Direct-editing provider offered to hosts that support it."""

from __future__ import annotations

from .core.config import Settings
from .core.crypt import Crypt
from .core.exceptions import DocumentServerNotConfiguredError
from .host.log_capability import LogCapability
from .host.services import LinkBuilderService, LocalizationService
from .notifications.notifier import editor_route

MIMETYPES = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
)

MIMETYPES_OPTIONAL = (
    "application/vnd.oasis.opendocument.text",
    "application/vnd.oasis.opendocument.spreadsheet",
    "application/vnd.oasis.opendocument.presentation",
    "text/csv",
    "text/plain",
)


class DirectEditor:
    def __init__(
        self,
        app_name: str,
        urls: LinkBuilderService,
        l10n: LocalizationService,
        log: LogCapability,
        settings: Settings,
        crypt: Crypt,
        language_code: str = "en",
    ) -> None:
        self.app_name = app_name
        self.urls = urls
        self.l10n = l10n
        self.log = log.for_operation("direct_editor")
        self.settings = settings
        self.crypt = crypt
        self.language_code = language_code

    def get_id(self) -> str:
        return self.app_name

    def get_name(self) -> str:
        return self.l10n.translate(self.settings.editor_display_name, {}, self.language_code)

    def get_mimetypes(self) -> list[str]:
        return list(MIMETYPES)

    def get_mimetypes_optional(self) -> list[str]:
        return list(MIMETYPES_OPTIONAL)

    def is_secure(self) -> bool:
        return False

    def open(self, file_id: int, user_id: str) -> str:
        """Return the editor link for *file_id* carrying a signed direct token."""
        if not self.settings.document_server_configured:
            self.log.warning("Direct editing requested without a document server", extra={"file_id": file_id})
            raise DocumentServerNotConfiguredError("direct_editing.open")
        token = self.crypt.get_hash({"action": "direct", "fileId": file_id, "userId": user_id})
        return self.urls.link_to_route_absolute(
            editor_route(self.app_name),
            {"fileId": file_id, "directToken": token},
        )
