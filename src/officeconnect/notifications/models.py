"""Notification records and the enriched output of notification preparation."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MENTION_SUBJECT = "mention_info"
MENTION_OBJECT_TYPE = "mention"


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    data: Any = None


class ActionLink(BaseModel):
    """Where in the document the editor should open: an action type and its opaque data."""

    model_config = ConfigDict(frozen=True)

    action: Action


class MentionSubject(BaseModel):
    """Validated view of a mention notification's subject parameters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    notifier_id: str = Field(alias="notifierId")
    file_id: int = Field(alias="fileId")
    action_link: ActionLink = Field(alias="actionLink")


class NotificationRecord(BaseModel):
    """A raw notification as delivered by the host."""

    model_config = ConfigDict(frozen=True)

    app: str
    user: str
    subject: str = MENTION_SUBJECT
    subject_parameters: dict[str, Any] = Field(default_factory=dict)
    object_type: str = MENTION_OBJECT_TYPE
    object_id: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def mention_subject(self) -> MentionSubject:
        """Validate and return the subject parameters.

        Raises:
            pydantic.ValidationError: If ``notifierId``, ``fileId`` or
                ``actionLink`` is missing or malformed.
        """
        return MentionSubject.model_validate(self.subject_parameters)


class RichObjectParameter(BaseModel):
    """Typed entity reference inside a rich subject."""

    model_config = ConfigDict(frozen=True)

    type: str
    id: str
    name: str


class PreparedNotification(BaseModel):
    """A notification ready to be shown to its recipient."""

    model_config = ConfigDict(frozen=True)

    notification: NotificationRecord
    icon: str
    parsed_subject: str
    rich_subject: str
    rich_subject_parameters: dict[str, RichObjectParameter]
    link: str
    link_route: str
    link_parameters: dict[str, Any]
