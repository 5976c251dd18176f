"""Domain layer — pure Python, no framework dependencies."""

from linear_discord.domain.errors import (
    ConfigError,
    DeliveryError,
    FormatError,
    MissingFieldError,
    RelayError,
)
from linear_discord.domain.models import (
    Embed,
    EmbedField,
    Notification,
    NotificationKind,
    OutboundMessage,
)
from linear_discord.domain.parser import parse_notification
from linear_discord.domain.display import (
    priority_emoji,
    status_color,
    relative_timestamp,
    iso_timestamp,
)
from linear_discord.domain.formatters import format_issue, format_comment, format_default
from linear_discord.domain.dispatcher import build_message, select_formatter

__all__ = [
    "ConfigError",
    "DeliveryError",
    "FormatError",
    "MissingFieldError",
    "RelayError",
    "Embed",
    "EmbedField",
    "Notification",
    "NotificationKind",
    "OutboundMessage",
    "parse_notification",
    "priority_emoji",
    "status_color",
    "relative_timestamp",
    "iso_timestamp",
    "format_issue",
    "format_comment",
    "format_default",
    "build_message",
    "select_formatter",
]
