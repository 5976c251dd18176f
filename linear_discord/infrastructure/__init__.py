"""Infrastructure — process-level plumbing."""

from linear_discord.infrastructure.log import setup_logging

__all__ = ["setup_logging"]
