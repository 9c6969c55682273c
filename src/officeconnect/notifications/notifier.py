"""Preparation of editor mention notifications.

The host hands over a raw ``NotificationRecord`` and the recipient's language
when it is about to render a notification. The notifier resolves the file,
re-checks that the recipient can still access it, and returns a localized
notification with a deep link into the editor.

Anything that makes the notification stale (file gone, access revoked) raises
``AlreadyProcessedError``; the host drops such notifications silently. A
failing host service is logged and handled the same way, unless lookup
failures are distinguished, in which case ``ServiceUnavailableError`` is raised.
"""

from __future__ import annotations

from ..core.exceptions import (
    AlreadyProcessedError,
    InvalidNotificationError,
    OfficeConnectException,
    ServiceUnavailableError,
)
from ..host.host_builder import Host
from ..host.services import ResolvedFile
from .models import NotificationRecord, PreparedNotification, RichObjectParameter
from .result import PrepareResult

MENTION_TEMPLATE = '{notifier} mentioned you in the {file}: "{comment}".'
ICON_IMAGE = "app-dark.svg"


def editor_route(app_name: str) -> str:
    return f"{app_name}.editor.index"


class Notifier:
    def __init__(self, app_name: str, host: Host, *, distinguish_lookup_failures: bool = False) -> None:
        self.app_name = app_name
        self.host = host
        self.distinguish_lookup_failures = distinguish_lookup_failures
        self.log = host.log.for_operation("notify.prepare")

    def get_id(self) -> str:
        """Identifier of the notifier, only [a-z0-9_]."""
        return self.app_name

    def get_name(self) -> str:
        """Human readable name describing the notifier."""
        return self.app_name

    def _lookup_failed(self, service: str, file_id: int, e: Exception) -> None:
        self.log.exception(
            f"Notify prepare: {service} lookup failed: {file_id}",
            extra={"file_id": file_id, "service": service},
        )
        if self.distinguish_lookup_failures:
            raise ServiceUnavailableError(service, str(e), details={"file_id": file_id}) from e

    def _find_file(self, notifier_id: str, file_id: int) -> ResolvedFile | None:
        try:
            return self.host.files.get_file_by_id(notifier_id, file_id)
        except Exception as e:
            self._lookup_failed("files", file_id, e)
            return None

    def _access_list(self, file: ResolvedFile) -> set[str]:
        try:
            return self.host.shares.get_access_list(file)
        except Exception as e:
            self._lookup_failed("shares", file.id, e)
            raise AlreadyProcessedError(file.id, "access list unavailable") from e

    def _display_name(self, user_id: str, file_id: int) -> str:
        try:
            return self.host.users.get_display_name(user_id) or user_id
        except Exception as e:
            self._lookup_failed("users", file_id, e)
            raise AlreadyProcessedError(file_id, "user directory unavailable") from e

    def prepare(self, notification: NotificationRecord, language_code: str) -> PreparedNotification:
        """Enrich *notification* for display in *language_code*.

        Raises:
            InvalidNotificationError: The notification belongs to another app.
            AlreadyProcessedError: The file is gone or the recipient lost access.
            ServiceUnavailableError: A host lookup failed and failures are not folded.
            pydantic.ValidationError: Required subject parameters are missing.
        """
        if notification.app != self.app_name:
            raise InvalidNotificationError(self.app_name, notification.app)

        subject = notification.mention_subject()
        notifier_id = subject.notifier_id
        file_id = subject.file_id
        action = subject.action_link.action

        file = self._find_file(notifier_id, file_id)
        if file is None:
            self.log.info(f"Notify prepare: file not found: {file_id}", extra={"file_id": file_id})
            raise AlreadyProcessedError(file_id, "file not found")

        if notification.user not in self._access_list(file):
            raise AlreadyProcessedError(file_id, "recipient has no access")

        notifier_name = self._display_name(notifier_id, file_id)

        urls = self.host.urls
        l10n = self.host.l10n
        comment = notification.object_id

        icon = urls.get_absolute_url(urls.image_path(self.app_name, ICON_IMAGE))
        parsed_subject = l10n.translate(
            MENTION_TEMPLATE,
            {"notifier": notifier_name, "file": file.name, "comment": comment},
            language_code,
        )
        rich_subject = l10n.translate(MENTION_TEMPLATE, {"comment": comment}, language_code)
        rich_parameters = {
            "notifier": RichObjectParameter(type="user", id=notifier_id, name=notifier_name),
            "file": RichObjectParameter(type="highlight", id=str(file_id), name=file.name),
        }

        route = editor_route(self.app_name)
        link_parameters = {
            "fileId": file_id,
            "actionType": action.type,
            "actionData": action.data,
        }
        link = urls.link_to_route_absolute(route, link_parameters)

        return PreparedNotification(
            notification=notification,
            icon=icon,
            parsed_subject=parsed_subject,
            rich_subject=rich_subject,
            rich_subject_parameters=rich_parameters,
            link=link,
            link_route=route,
            link_parameters=link_parameters,
        )

    def try_prepare(self, notification: NotificationRecord, language_code: str) -> PrepareResult:
        """Like ``prepare`` but returns the signalled conditions as a ``PrepareResult``."""
        try:
            return PrepareResult.ok(self.prepare(notification, language_code))
        except OfficeConnectException as e:
            return PrepareResult.from_exception(e)
