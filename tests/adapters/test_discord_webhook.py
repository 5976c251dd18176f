"""Unit tests for DiscordWebhookClient."""

import asyncio

import aiohttp
import pytest
from unittest.mock import patch

from linear_discord.adapters.discord.webhook import DiscordWebhookClient
from linear_discord.config import AppConfig
from linear_discord.domain.errors import DeliveryError
from linear_discord.domain.models import Embed, OutboundMessage
from linear_discord.ports.outbound import MessageSinkPort

WEBHOOK_URL = "https://discord.com/api/webhooks/1/abc"

MESSAGE = OutboundMessage(
    content="hello",
    embeds=(Embed(title="Linear Update: Project", color=0x5E6AD2),),
)


def _mock_aiohttp_session(status=204, reason="No Content", body="", error=None):
    """Return (FakeSession, calls) replacing aiohttp.ClientSession.
    calls records (url, kwargs) for every post(); error is raised from post().
    """
    calls = []

    class FakeResponse:
        def __init__(self):
            self.status = status
            self.reason = reason

        async def text(self):
            return body

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, *args, **kwargs):
            self.kwargs = kwargs

        def post(self, url, **kwargs):
            if error is not None:
                raise error
            calls.append((url, kwargs))
            return FakeResponse()

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession, calls


@pytest.fixture
def config():
    return AppConfig(discord_webhook_url=WEBHOOK_URL, delivery_timeout_seconds=2.0)


class TestSend:
    @pytest.mark.asyncio
    async def test_success(self, config):
        session, calls = _mock_aiohttp_session()
        client = DiscordWebhookClient(config)
        with patch("linear_discord.adapters.discord.webhook.aiohttp.ClientSession", session):
            await client.send(MESSAGE)
        assert len(calls) == 1
        url, kwargs = calls[0]
        assert url == WEBHOOK_URL
        assert kwargs["json"] == MESSAGE.to_payload()

    @pytest.mark.asyncio
    async def test_200_is_success(self, config):
        session, calls = _mock_aiohttp_session(status=200, reason="OK")
        with patch("linear_discord.adapters.discord.webhook.aiohttp.ClientSession", session):
            await DiscordWebhookClient(config).send(MESSAGE)
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_non_2xx_raises(self, config):
        session, _ = _mock_aiohttp_session(
            status=400, reason="Bad Request", body='{"message": "Invalid Form Body"}'
        )
        client = DiscordWebhookClient(config)
        with patch("linear_discord.adapters.discord.webhook.aiohttp.ClientSession", session):
            with pytest.raises(DeliveryError) as exc:
                await client.send(MESSAGE)
        assert exc.value.status == 400
        assert exc.value.reason == "Bad Request"
        assert "Invalid Form Body" in exc.value.body
        assert "Bad Request" in str(exc.value)

    @pytest.mark.asyncio
    async def test_timeout_raises(self, config):
        session, _ = _mock_aiohttp_session(error=asyncio.TimeoutError())
        client = DiscordWebhookClient(config)
        with patch("linear_discord.adapters.discord.webhook.aiohttp.ClientSession", session):
            with pytest.raises(DeliveryError) as exc:
                await client.send(MESSAGE)
        assert "timed out" in str(exc.value)
        assert exc.value.status is None

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, config):
        session, _ = _mock_aiohttp_session(error=aiohttp.ClientConnectionError("refused"))
        client = DiscordWebhookClient(config)
        with patch("linear_discord.adapters.discord.webhook.aiohttp.ClientSession", session):
            with pytest.raises(DeliveryError):
                await client.send(MESSAGE)


class TestIdentity:
    def test_unconfigured_leaves_message(self, config):
        client = DiscordWebhookClient(config)
        assert client.with_identity(MESSAGE) == MESSAGE

    @pytest.mark.asyncio
    async def test_configured_identity_is_sent(self):
        config = AppConfig(
            discord_webhook_url=WEBHOOK_URL,
            discord_username="Linear",
            discord_avatar_url="https://example.com/linear.png",
        )
        session, calls = _mock_aiohttp_session()
        with patch("linear_discord.adapters.discord.webhook.aiohttp.ClientSession", session):
            await DiscordWebhookClient(config).send(MESSAGE)
        payload = calls[0][1]["json"]
        assert payload["username"] == "Linear"
        assert payload["avatar_url"] == "https://example.com/linear.png"


class TestPortConformance:
    def test_is_message_sink(self, config):
        assert isinstance(DiscordWebhookClient(config), MessageSinkPort)
