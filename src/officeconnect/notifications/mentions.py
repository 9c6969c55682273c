"""Producing mention notifications from editor comments."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from .models import MENTION_OBJECT_TYPE, MENTION_SUBJECT, ActionLink, NotificationRecord


def build_mention_notifications(
    app_name: str,
    notifier_id: str,
    file_id: int,
    action_link: ActionLink | dict[str, Any],
    comment: str,
    recipients: Iterable[str],
    *,
    now: datetime | None = None,
) -> list[NotificationRecord]:
    """Return one notification per mentioned user.

    Duplicate recipients collapse to one record and the author of the comment
    is never notified about their own mention. Order follows first appearance
    in *recipients*.
    """
    if not comment:
        return []

    link = action_link if isinstance(action_link, ActionLink) else ActionLink.model_validate(action_link)
    created_at = now or datetime.now(UTC)
    parameters = {
        "notifierId": notifier_id,
        "fileId": file_id,
        "actionLink": link.model_dump(),
    }

    records: list[NotificationRecord] = []
    seen: set[str] = set()
    for user_id in recipients:
        if not user_id or user_id == notifier_id or user_id in seen:
            continue
        seen.add(user_id)
        records.append(
            NotificationRecord(
                app=app_name,
                user=user_id,
                subject=MENTION_SUBJECT,
                subject_parameters=dict(parameters),
                object_type=MENTION_OBJECT_TYPE,
                object_id=comment,
                created_at=created_at,
            )
        )
    return records
