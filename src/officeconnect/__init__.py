"""officeconnect: document editor integration for a file collaboration host."""

from officeconnect.application import Application, create_application
from officeconnect.notifications import NotificationRecord, Notifier, PreparedNotification, PrepareResult

__version__ = "0.1.0"

__all__ = [
    "Application",
    "create_application",
    "NotificationRecord",
    "Notifier",
    "PreparedNotification",
    "PrepareResult",
]
