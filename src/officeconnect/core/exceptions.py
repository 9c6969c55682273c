"""Custom exceptions for the officeconnect plugin.

Notification preparation signals exactly three conditions, enumerated by
``NotificationErrorKind``. Callers that prefer values over exceptions use
``Notifier.try_prepare``, which maps these onto a ``PrepareResult``.
"""

from enum import Enum
from typing import Any


class NotificationErrorKind(str, Enum):
    """Conditions a notification preparation may signal."""

    invalid_argument = "invalid_argument"
    already_processed = "already_processed"
    service_unavailable = "service_unavailable"


class OfficeConnectException(Exception):
    """Base exception class for the officeconnect plugin."""

    kind: NotificationErrorKind | None = None

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class InvalidNotificationError(OfficeConnectException, ValueError):
    """Raised when a notification was routed to a notifier of another app."""

    kind = NotificationErrorKind.invalid_argument

    def __init__(self, expected_app: str, actual_app: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Notification not from {expected_app}",
            error_code="NOTIFICATION_WRONG_APP",
            details=details or {"expected_app": expected_app, "actual_app": actual_app},
        )


class AlreadyProcessedError(OfficeConnectException):
    """Raised when a notification is obsolete and must be dropped silently.

    The referenced file no longer exists, or the recipient lost access to it
    between the event and rendering.
    """

    kind = NotificationErrorKind.already_processed

    def __init__(self, file_id: int | str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Notification for file '{file_id}' is obsolete: {reason}",
            error_code="NOTIFICATION_ALREADY_PROCESSED",
            details=details or {"file_id": file_id, "reason": reason},
        )


class ServiceUnavailableError(OfficeConnectException):
    """Raised when a host lookup service fails and failures are not folded."""

    kind = NotificationErrorKind.service_unavailable

    def __init__(self, service: str, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Host service '{service}' unavailable: {reason}",
            error_code="HOST_SERVICE_UNAVAILABLE",
            details=details or {"service": service, "reason": reason},
        )


class DocumentServerNotConfiguredError(OfficeConnectException):
    """Raised when an editor operation needs a document server and none is set."""

    def __init__(self, operation: str):
        super().__init__(
            message="Document server is not configured",
            error_code="DOCUMENT_SERVER_NOT_CONFIGURED",
            details={"operation": operation},
        )
