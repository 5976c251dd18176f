"""Discord adapters."""

from linear_discord.adapters.discord.webhook import DiscordWebhookClient

__all__ = ["DiscordWebhookClient"]
