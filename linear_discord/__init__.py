"""Linear → Discord webhook relay."""

from linear_discord.config import AppConfig, __version__
from linear_discord.adapters.web.server import create_app
from linear_discord.adapters.discord.webhook import DiscordWebhookClient
from linear_discord.domain import (
    DeliveryError,
    FormatError,
    MissingFieldError,
    RelayError,
    build_message,
    parse_notification,
)

__all__ = [
    "__version__",
    "AppConfig",
    "create_app",
    "DiscordWebhookClient",
    "DeliveryError",
    "FormatError",
    "MissingFieldError",
    "RelayError",
    "build_message",
    "parse_notification",
]
