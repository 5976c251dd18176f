"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI

from linear_discord.adapters.discord.webhook import DiscordWebhookClient
from linear_discord.adapters.web.routes import webhook_router
from linear_discord.config import AppConfig, __version__
from linear_discord.ports.outbound import MessageSinkPort


def create_app(config: AppConfig, sink: Optional[MessageSinkPort] = None) -> FastAPI:
    """Build the relay app; ``sink`` defaults to the configured Discord webhook."""
    app = FastAPI(title="Linear to Discord Relay", version=__version__)
    app.state.config = config
    app.state.sink = sink if sink is not None else DiscordWebhookClient(config)
    app.include_router(webhook_router)
    return app
