"""Discord incoming-webhook client using aiohttp."""

import asyncio
import dataclasses
import logging

import aiohttp

from linear_discord.config import AppConfig
from linear_discord.domain.errors import DeliveryError
from linear_discord.domain.models import OutboundMessage

logger = logging.getLogger(__name__)


class DiscordWebhookClient:
    """MessageSinkPort implementation posting to one Discord webhook URL."""

    def __init__(self, config: AppConfig):
        self._url = config.discord_webhook_url
        self._timeout = aiohttp.ClientTimeout(total=config.delivery_timeout_seconds)
        self._username = config.discord_username
        self._avatar_url = config.discord_avatar_url

    def with_identity(self, message: OutboundMessage) -> OutboundMessage:
        """Apply the configured username/avatar unless the message sets its own."""
        return dataclasses.replace(
            message,
            username=message.username or self._username,
            avatar_url=message.avatar_url or self._avatar_url,
        )

    async def send(self, message: OutboundMessage) -> None:
        """POST the message; any non-2xx answer is a delivery failure.

        Raises:
            DeliveryError: Discord rejected the message, or the call failed or timed out.
        """
        payload = self.with_identity(message).to_payload()
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(self._url, json=payload) as resp:
                    if not 200 <= resp.status < 300:
                        body = await resp.text()
                        logger.error("Discord webhook failed (%s): %s", resp.status, body)
                        raise DeliveryError(
                            resp.reason or str(resp.status), status=resp.status, body=body
                        )
        except asyncio.TimeoutError as e:
            raise DeliveryError(f"timed out after {self._timeout.total}s") from e
        except aiohttp.ClientError as e:
            raise DeliveryError(str(e) or type(e).__name__) from e

        logger.info("Delivered message to Discord (%d embed(s))", len(payload["embeds"]))
