"""Result envelope for notification preparation.

For callers that would rather branch on a value than catch exceptions::

    result = notifier.try_prepare(record, "de")
    if result.is_ok:
        show(result.notification)
    elif result.kind is NotificationErrorKind.already_processed:
        drop(record)
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import NotificationErrorKind, OfficeConnectException
from .models import PreparedNotification


class PrepareResult:
    """Either a prepared notification or one of the enumerated error kinds.

    Prefer the classmethods ``ok()``, ``err()`` and ``from_exception()`` over
    direct construction.
    """

    def __init__(
        self,
        status: str,
        notification: PreparedNotification | None = None,
        kind: NotificationErrorKind | None = None,
        error: dict[str, Any] | None = None,
    ) -> None:
        self.status = status
        self.notification = notification
        self.kind = kind
        self.error = error

    @classmethod
    def ok(cls, notification: PreparedNotification) -> "PrepareResult":
        """Return a successful result."""
        return cls("success", notification=notification)

    @classmethod
    def err(
        cls,
        kind: NotificationErrorKind,
        message: str,
        code: str = "notification_error",
        details: dict[str, Any] | None = None,
    ) -> "PrepareResult":
        """Return an error result."""
        return cls(
            "error",
            kind=kind,
            error={"code": code, "message": message, "details": details or {}},
        )

    @classmethod
    def from_exception(cls, exc: OfficeConnectException) -> "PrepareResult":
        if exc.kind is None:
            raise ValueError(f"{type(exc).__name__} carries no notification error kind")
        return cls.err(exc.kind, exc.message, code=exc.error_code, details=exc.details)

    @property
    def is_ok(self) -> bool:
        return self.status == "success"

    @property
    def should_drop(self) -> bool:
        """True when the caller must discard the notification without surfacing an error."""
        return self.kind is NotificationErrorKind.already_processed

    def __repr__(self) -> str:
        return f"PrepareResult(status={self.status!r}, kind={self.kind!r})"
