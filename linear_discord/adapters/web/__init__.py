"""HTTP surface (FastAPI)."""

from linear_discord.adapters.web.server import create_app

__all__ = ["create_app"]
