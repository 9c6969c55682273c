"""LogCapability - the plugin's logging sink.

Wraps the ``officeconnect.runtime`` logger so every entry carries the owning
app id and, optionally, the operation being performed.
"""

from __future__ import annotations

import logging
from typing import Any

# Use a dedicated logger for plugin runtime logs
runtime_logger = logging.getLogger("officeconnect.runtime")


class LogCapability:
    """Leveled logging with automatic context injection.

    Example:
        log = LogCapability(app_name="officeconnect", operation="notify.prepare")
        log.info("file not found", extra={"file_id": 42})

    """

    __slots__ = ("_app_name", "_operation")

    _app_name: str
    _operation: str | None

    def __init__(self, *, app_name: str, operation: str | None = None) -> None:
        object.__setattr__(self, "_app_name", app_name)
        object.__setattr__(self, "_operation", operation)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"LogCapability is bound to app '{self._app_name}' and immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"LogCapability is bound to app '{self._app_name}' and immutable")

    def for_operation(self, operation: str) -> LogCapability:
        """Return a sink bound to the same app and the given operation."""
        return LogCapability(app_name=self._app_name, operation=operation)

    def _make_extra(self, extra: dict[str, Any] | None = None) -> dict[str, Any]:
        """Merge caller context with the protected app/operation fields.

        Protected fields are set after merging so callers cannot spoof them.
        """
        base: dict[str, Any] = {}
        if extra:
            base.update(extra)
        base["app"] = self._app_name
        if self._operation:
            base["operation"] = self._operation
        return base

    def debug(self, msg: str, *, extra: dict[str, Any] | None = None) -> None:
        runtime_logger.debug(msg, extra=self._make_extra(extra))

    def info(self, msg: str, *, extra: dict[str, Any] | None = None) -> None:
        runtime_logger.info(msg, extra=self._make_extra(extra))

    def warning(self, msg: str, *, extra: dict[str, Any] | None = None) -> None:
        runtime_logger.warning(msg, extra=self._make_extra(extra))

    def error(self, msg: str, *, extra: dict[str, Any] | None = None) -> None:
        runtime_logger.error(msg, extra=self._make_extra(extra))

    def exception(self, msg: str, *, extra: dict[str, Any] | None = None) -> None:
        """Log an error with exception info.

        Call from within an exception handler to include the traceback.
        """
        runtime_logger.exception(msg, extra=self._make_extra(extra))
