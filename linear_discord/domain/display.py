"""Display lookup tables and timestamp helpers."""

import math
from datetime import datetime, timezone
from typing import Any, Optional

from linear_discord.domain.errors import FormatError

NO_PRIORITY_EMOJI = "🔘"

PRIORITY_EMOJIS = {
    0: NO_PRIORITY_EMOJI,  # No priority
    1: "⬇️",  # Low
    2: "⏺️",  # Medium
    3: "⬆️",  # High
    4: "🔥",  # Urgent
}

BRAND_COLOR = 0x5E6AD2  # Linear blue

STATUS_COLORS = {
    "done": 0x77B255,  # Green
    "completed": 0x77B255,
    "in progress": 0xF2C94C,  # Yellow
    "in review": 0xFFC107,
    "canceled": 0x95A2B3,  # Gray
    "blocked": 0xFF5722,  # Orange
}


def priority_emoji(priority: Any) -> str:
    """Emoji for a Linear priority level (0-4); anything else is "no priority"."""
    if isinstance(priority, bool) or not isinstance(priority, int):
        return NO_PRIORITY_EMOJI
    return PRIORITY_EMOJIS.get(priority, NO_PRIORITY_EMOJI)


def status_color(status: Optional[str]) -> int:
    """Embed color for a workflow state name, matched case-insensitively."""
    if not isinstance(status, str):
        return BRAND_COLOR
    return STATUS_COLORS.get(status.lower(), BRAND_COLOR)


def parse_iso(value: Any) -> datetime:
    """Parse an ISO-8601 date or date-time; naive values are taken as UTC.

    Raises:
        FormatError: ``value`` is not a string or not a valid ISO-8601 date.
    """
    if not isinstance(value, str):
        raise FormatError(f"Expected an ISO-8601 date string, got {value!r}")
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise FormatError(f"Invalid ISO-8601 date: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def relative_timestamp(value: Any) -> str:
    """Discord relative-time token, e.g. ``<t:1704067200:R>``."""
    return f"<t:{math.floor(parse_iso(value).timestamp())}:R>"


def iso_timestamp(value: Any) -> str:
    """Normalize to UTC with millisecond precision: ``2024-01-01T00:00:00.000Z``."""
    utc = parse_iso(value).astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
