"""Linear webhook payload → Notification.

The body is validated against pydantic models of Linear's webhook shape,
then mapped onto the frozen domain records. Only shape is checked here.
Whether a field is *required* depends on the formatter that ends up handling
the notification, so nested records stay optional and each formatter states
its own defaulting policy.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from linear_discord.domain.errors import FormatError, MissingFieldError
from linear_discord.domain.models import (
    Actor,
    CommentData,
    IssueData,
    IssueRef,
    Label,
    Notification,
    NotificationKind,
    State,
    Team,
    User,
)

UNKNOWN_ACTION = "unknown"


# ── Inbound payload models ──────────────────────────────────


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class NamedRef(_Payload):
    name: Optional[str] = None


class LabelRef(_Payload):
    name: Optional[str] = None


class TeamRef(_Payload):
    key: Optional[str] = None
    name: Optional[str] = None


class IssueRefPayload(_Payload):
    identifier: Optional[str] = None


class IssuePayload(_Payload):
    team: Optional[TeamRef] = None
    number: Optional[int] = None
    identifier: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    state: Optional[NamedRef] = None
    priority: Optional[int] = None
    assignee: Optional[NamedRef] = None
    labels: Optional[List[Optional[LabelRef]]] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class CommentPayload(_Payload):
    issue: Optional[IssueRefPayload] = None
    user: Optional[NamedRef] = None
    body: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")


class LinearWebhook(_Payload):
    type: Optional[str] = None
    action: Optional[str] = None
    actor: Optional[NamedRef] = None
    data: Optional[Dict[str, Any]] = None


# ── Payload → domain ────────────────────────────────────────


def _validate(model, raw: Any, what: str):
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise FormatError(f"Malformed {what}: {e}") from e


def to_issue_data(payload: IssuePayload) -> IssueData:
    # Labels without a name carry nothing to display
    labels = tuple(
        Label(name=label.name)
        for label in payload.labels or ()
        if label is not None and label.name
    )
    return IssueData(
        team=Team(key=payload.team.key, name=payload.team.name) if payload.team else None,
        number=payload.number,
        identifier=payload.identifier,
        title=payload.title,
        url=payload.url,
        state=State(name=payload.state.name) if payload.state else None,
        priority=payload.priority,
        assignee=payload.assignee.name if payload.assignee else None,
        labels=labels,
        created_at=payload.created_at,
        updated_at=payload.updated_at,
    )


def to_comment_data(payload: CommentPayload) -> CommentData:
    return CommentData(
        issue=IssueRef(identifier=payload.issue.identifier) if payload.issue else None,
        user=User(name=payload.user.name) if payload.user else None,
        body=payload.body,
        created_at=payload.created_at,
    )


def parse_notification(payload: Any) -> Notification:
    """Build a Notification from a decoded Linear webhook body.

    Raises:
        FormatError: The payload or one of its fields has the wrong shape.
        MissingFieldError: An Issue/Comment notification carries no ``data``.
    """
    webhook = _validate(LinearWebhook, payload, "webhook body")
    kind = NotificationKind.from_type(webhook.type)

    if kind is NotificationKind.OTHER:
        data = MappingProxyType(dict(webhook.data or {}))
    elif webhook.data is None:
        raise MissingFieldError("data")
    elif kind is NotificationKind.ISSUE:
        data = to_issue_data(_validate(IssuePayload, webhook.data, "issue data"))
    else:
        data = to_comment_data(_validate(CommentPayload, webhook.data, "comment data"))

    return Notification(
        type=webhook.type,
        kind=kind,
        action=webhook.action or UNKNOWN_ACTION,
        actor=Actor(name=webhook.actor.name if webhook.actor else None),
        data=data,
    )
