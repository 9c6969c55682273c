from .mentions import build_mention_notifications
from .models import ActionLink, MentionSubject, NotificationRecord, PreparedNotification, RichObjectParameter
from .notifier import Notifier
from .result import PrepareResult

__all__ = [
    "ActionLink",
    "build_mention_notifications",
    "MentionSubject",
    "NotificationRecord",
    "Notifier",
    "PreparedNotification",
    "PrepareResult",
    "RichObjectParameter",
]
