"""Notification formatters: Notification → OutboundMessage.

Each formatter is a pure function. Defaulting policy for optional Linear
fields lives here, next to the text that displays them.
"""

from typing import Callable, Dict, List, Tuple

from linear_discord.domain.display import (
    BRAND_COLOR,
    iso_timestamp,
    priority_emoji,
    relative_timestamp,
    status_color,
)
from linear_discord.domain.errors import MissingFieldError
from linear_discord.domain.models import (
    CommentData,
    Embed,
    EmbedField,
    IssueData,
    Notification,
    OutboundMessage,
)

LINEAR_ISSUE_URL = "https://linear.app/issue/{identifier}"

DONE_STATE = "Done"
DONE_MARK = "✅"

# action → (emoji, description template)
ISSUE_ACTIONS: Dict[str, Tuple[str, str]] = {
    "create": ("🆕", "New issue created {when}"),
    "update": ("📝", "Issue updated {when}"),
    "remove": ("🗑️", "Issue deleted {when}"),
}
FALLBACK_ACTION_EMOJI = "ℹ️"

Formatter = Callable[[Notification], OutboundMessage]


def issue_url(identifier: str) -> str:
    return LINEAR_ISSUE_URL.format(identifier=identifier)


def issue_identifier(data: IssueData) -> str:
    """``{team key}-{number}``, falling back to Linear's own identifier."""
    if data.team_key and data.number is not None:
        return f"{data.team_key}-{data.number}"
    if data.identifier:
        return data.identifier
    raise MissingFieldError("team.key")


def describe_action(action: str, when: str) -> Tuple[str, str]:
    if action not in ISSUE_ACTIONS:
        return FALLBACK_ACTION_EMOJI, f"Issue {action} {when}"
    emoji, template = ISSUE_ACTIONS[action]
    return emoji, template.format(when=when)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _issue_fields(data: IssueData) -> List[EmbedField]:
    priority = f"P{data.priority}" if data.priority else "None"
    fields = [
        EmbedField("Status", data.state_name or "No status"),
        EmbedField("Priority", f"{priority_emoji(data.priority)} {priority}"),
        EmbedField("Assignee", data.assignee or "Unassigned"),
    ]
    if data.labels:
        labels = ", ".join(f"`{label.name}`" for label in data.labels)
        fields.append(EmbedField("Labels", labels, inline=False))
    return fields


def format_issue(notification: Notification) -> OutboundMessage:
    """Status line plus one embed summarizing the issue change."""
    data = notification.data
    if not isinstance(data, IssueData):
        raise MissingFieldError("data")

    identifier = issue_identifier(data)
    url = issue_url(identifier)
    changed_at = data.changed_at
    if changed_at is None:
        raise MissingFieldError("updatedAt")

    emoji, description = describe_action(notification.action, relative_timestamp(changed_at))

    status = data.state_name
    mark = f"{DONE_MARK} " if status == DONE_STATE else ""
    content = (
        f"{mark}**{notification.actor.name or 'Unknown'}** changed issue status to "
        f"**{status or 'No status'}** in "
        f"[{data.team_name or 'Unknown'} Team]({data.url or url})"
    )

    embed = Embed(
        title=f"{emoji} {identifier}: {data.title or 'Untitled'}",
        url=url,
        description=description,
        color=status_color(status),
        fields=tuple(_issue_fields(data)),
        footer=f"{data.team_name or 'Unknown Team'} • {_capitalize(notification.action)}",
        timestamp=iso_timestamp(changed_at),
    )
    return OutboundMessage(content=content, embeds=(embed,))


def format_comment(notification: Notification) -> OutboundMessage:
    data = notification.data
    if not isinstance(data, CommentData):
        raise MissingFieldError("data")
    if data.issue is None or not data.issue.identifier:
        raise MissingFieldError("issue.identifier")
    if data.user is None or not data.user.name:
        raise MissingFieldError("user.name")
    if data.created_at is None:
        raise MissingFieldError("createdAt")

    identifier = data.issue.identifier
    embed = Embed(
        title=f"New comment on {identifier}",
        url=issue_url(identifier),
        color=BRAND_COLOR,
        footer=f"Comment by {data.user.name}",
        timestamp=iso_timestamp(data.created_at),
    )
    return OutboundMessage(embeds=(embed,))


def format_default(notification: Notification) -> OutboundMessage:
    """Generic embed for notification types without a dedicated formatter.

    The description appends "ed" to the raw action verb; best-effort only.
    """
    type_name = notification.type or "Unknown"
    embed = Embed(
        title=f"Linear Update: {type_name}",
        description=f"A {type_name} was {notification.action}ed",
        color=BRAND_COLOR,
    )
    return OutboundMessage(embeds=(embed,))
