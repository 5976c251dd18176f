"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

# Discord embed limits (characters / counts)
MAX_CONTENT = 2000
MAX_TITLE = 256
MAX_DESCRIPTION = 4096
MAX_FIELD_NAME = 256
MAX_FIELD_VALUE = 1024
MAX_FOOTER = 2048
MAX_FIELDS = 25
MAX_EMBEDS = 10


def clamp(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


class NotificationKind(Enum):
    """Notification types the relay knows how to format."""

    ISSUE = "Issue"
    COMMENT = "Comment"
    OTHER = "other"

    @classmethod
    def from_type(cls, type_name: Optional[str]) -> "NotificationKind":
        for kind in (cls.ISSUE, cls.COMMENT):
            if type_name == kind.value:
                return kind
        return cls.OTHER


# ── Inbound (Linear) ────────────────────────────────────────


@dataclass(frozen=True)
class Actor:
    name: Optional[str] = None


@dataclass(frozen=True)
class Team:
    key: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class State:
    name: Optional[str] = None


@dataclass(frozen=True)
class Label:
    name: str


@dataclass(frozen=True)
class IssueData:
    """Payload of an ``Issue`` notification."""

    team: Optional[Team] = None
    number: Optional[int] = None
    identifier: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    state: Optional[State] = None
    priority: Optional[int] = None
    assignee: Optional[str] = None
    labels: Tuple[Label, ...] = ()
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def team_key(self) -> Optional[str]:
        return self.team.key if self.team else None

    @property
    def team_name(self) -> Optional[str]:
        return self.team.name if self.team else None

    @property
    def state_name(self) -> Optional[str]:
        return self.state.name if self.state else None

    @property
    def changed_at(self) -> Optional[str]:
        """Most recent known timestamp: updatedAt, else createdAt."""
        return self.updated_at or self.created_at


@dataclass(frozen=True)
class IssueRef:
    identifier: Optional[str] = None


@dataclass(frozen=True)
class User:
    name: Optional[str] = None


@dataclass(frozen=True)
class CommentData:
    """Payload of a ``Comment`` notification."""

    issue: Optional[IssueRef] = None
    user: Optional[User] = None
    body: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class Notification:
    """A single inbound Linear webhook event."""

    type: Optional[str]
    kind: NotificationKind
    action: str
    actor: Actor = field(default_factory=Actor)
    data: Union[IssueData, CommentData, Mapping[str, Any], None] = None


# ── Outbound (Discord) ──────────────────────────────────────


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": clamp(self.name, MAX_FIELD_NAME),
            "value": clamp(self.value, MAX_FIELD_VALUE),
            "inline": self.inline,
        }


@dataclass(frozen=True)
class Embed:
    title: str
    color: int
    url: Optional[str] = None
    description: Optional[str] = None
    fields: Tuple[EmbedField, ...] = ()
    footer: Optional[str] = None
    timestamp: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render as a Discord embed object, omitting absent keys."""
        out: Dict[str, Any] = {"title": clamp(self.title, MAX_TITLE)}
        if self.url:
            out["url"] = self.url
        if self.description:
            out["description"] = clamp(self.description, MAX_DESCRIPTION)
        out["color"] = self.color
        if self.fields:
            out["fields"] = [f.to_dict() for f in self.fields[:MAX_FIELDS]]
        if self.footer:
            out["footer"] = {"text": clamp(self.footer, MAX_FOOTER)}
        if self.timestamp:
            out["timestamp"] = self.timestamp
        return out


@dataclass(frozen=True)
class OutboundMessage:
    """Discord incoming-webhook message."""

    embeds: Tuple[Embed, ...] = ()
    content: Optional[str] = None
    username: Optional[str] = None
    avatar_url: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.content:
            payload["content"] = clamp(self.content, MAX_CONTENT)
        if self.username:
            payload["username"] = self.username
        if self.avatar_url:
            payload["avatar_url"] = self.avatar_url
        payload["embeds"] = [e.to_dict() for e in self.embeds[:MAX_EMBEDS]]
        return payload
