"""Routes a Notification to its formatter by kind."""

import logging
from types import MappingProxyType
from typing import Mapping

from linear_discord.domain.formatters import (
    Formatter,
    format_comment,
    format_default,
    format_issue,
)
from linear_discord.domain.models import Notification, NotificationKind, OutboundMessage

logger = logging.getLogger(__name__)

FORMATTERS: Mapping[NotificationKind, Formatter] = MappingProxyType({
    NotificationKind.ISSUE: format_issue,
    NotificationKind.COMMENT: format_comment,
})


def select_formatter(kind: NotificationKind) -> Formatter:
    return FORMATTERS.get(kind, format_default)


def build_message(notification: Notification) -> OutboundMessage:
    """Format a notification with the formatter registered for its kind.

    Kinds without an entry in ``FORMATTERS`` use ``format_default``.
    """
    formatter = select_formatter(notification.kind)
    if formatter is format_default:
        logger.info(
            "No formatter for type %r, using default", notification.type
        )
    else:
        logger.debug("Formatting %s notification (%s)", notification.kind.value, notification.action)
    return formatter(notification)
